"""SVG analemma chart renderer.

Produces a self-contained SVG string drawn in canvas pixel space. The plot
group is translated to the bottom-left corner of the plot area, so projected
points (y negative upward) are used as-is:

  canvas (0, 0) = top-left
  plot origin   = (margin, height - margin)
"""

from __future__ import annotations

from analemma.models import ChartData, ChartLayout, ProjectedPoint
from analemma.projection import altitude_ticks, azimuth_ticks, project, project_traces

_SELECTED_COLOR = "#dc2626"
_TODAY_COLOR = "#fbbf24"

_THEMES = {
    False: {"bg": "#fafafa", "grid": "#e5e5e5", "text": "#737373", "dot": "#d4d4d4"},
    True: {"bg": "#121212", "grid": "#404040", "text": "#a3a3a3", "dot": "#525252"},
}


def _dot(point: ProjectedPoint, r: float, fill: str) -> str:
    return f'<circle cx="{point.x:.2f}" cy="{point.y:.2f}" r="{r}" fill="{fill}"/>'


def render_svg(
    chart: ChartData,
    width: float = 1000,
    height: float = 600,
    dark: bool = False,
    margin_fraction: float = 0.08,
) -> str:
    """Return an SVG document for the chart.

    Args:
        chart: Fully computed chart data.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        dark: Use the dark color theme.
        margin_fraction: Margin around the plot area, relative to the smaller side.

    Returns:
        SVG markup string.
    """
    theme = _THEMES[dark]
    layout = ChartLayout.from_canvas(width, height, margin_fraction)
    origin_x, origin_y = layout.to_canvas(ProjectedPoint(x=0, y=0))
    pw, ph = layout.width, layout.height
    font_size = max(10, min(12, pw / 60))

    # --- Grid ---
    grid: list[str] = []
    labels: list[str] = []
    for alt in altitude_ticks(chart.scale):
        y = -(alt / chart.scale.max_altitude_deg) * ph
        grid.append(f'<line x1="0" y1="{y:.2f}" x2="{pw:.2f}" y2="{y:.2f}"/>')
        labels.append(
            f'<text x="-5" y="{y + 4:.2f}" text-anchor="end">{alt}°</text>'
        )
    for az, name in azimuth_ticks():
        x = az / 360 * pw
        grid.append(f'<line x1="{x:.2f}" y1="0" x2="{x:.2f}" y2="{-ph:.2f}"/>')
        if name:
            labels.append(f'<text x="{x:.2f}" y="15" text-anchor="middle">{name}</text>')

    # --- Today's path ---
    path_svg = ""
    if chart.day_path is not None:
        # Break the polyline wherever the sun dips below the horizon
        segments: list[list[ProjectedPoint]] = [[]]
        for p in chart.day_path:
            if p.above_horizon:
                segments[-1].append(project(p, chart.scale, pw, ph))
            elif segments[-1]:
                segments.append([])
        polylines = [
            " ".join(f"{pt.x:.2f},{pt.y:.2f}" for pt in seg)
            for seg in segments
            if len(seg) > 1
        ]
        path_svg = "\n    ".join(
            f'<polyline points="{pts}" fill="none" stroke="{_TODAY_COLOR}"'
            f' stroke-width="2" stroke-opacity="{0.4 if dark else 0.6}"/>'
            for pts in polylines
        )

    # --- Hour curves ---
    projected = project_traces(
        chart.traces, chart.scale, pw, ph, chart.show_below_horizon
    )
    dots: list[str] = []
    selected_dots: list[str] = []
    for label, points in projected.items():
        if label == chart.selected:
            selected_dots.extend(_dot(p, 5, "url(#glow)") for p in points)
            selected_dots.extend(_dot(p, 2, _SELECTED_COLOR) for p in points)
        else:
            dots.extend(_dot(p, 2, theme["dot"]) for p in points)

    # --- Today's marker ---
    marker_svg = ""
    if chart.today_point is not None and chart.today_point.above_horizon:
        tp = project(chart.today_point, chart.scale, pw, ph)
        marker_svg = (
            f'{_dot(tp, 10, "url(#today)")}'
            f'<circle cx="{tp.x:.2f}" cy="{tp.y:.2f}" r="3" fill="{_TODAY_COLOR}"/>'
        )

    grid_svg = "\n    ".join(grid)
    labels_svg = "\n    ".join(labels)
    dots_svg = "\n    ".join(dots + selected_dots)

    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <defs>
    <radialGradient id="glow">
      <stop offset="0%" stop-color="rgba(220, 38, 38, 0.8)"/>
      <stop offset="50%" stop-color="rgba(220, 38, 38, 0.2)"/>
      <stop offset="100%" stop-color="rgba(220, 38, 38, 0)"/>
    </radialGradient>
    <radialGradient id="today">
      <stop offset="0%" stop-color="rgba(251, 191, 36, 0.6)"/>
      <stop offset="50%" stop-color="rgba(251, 191, 36, 0.2)"/>
      <stop offset="100%" stop-color="rgba(251, 191, 36, 0)"/>
    </radialGradient>
  </defs>
  <rect width="100%" height="100%" fill="{theme["bg"]}"/>
  <g transform="translate({origin_x:.2f},{origin_y:.2f})">
  <g stroke="{theme["grid"]}" stroke-width="1">
    {grid_svg}
  </g>
  <g fill="{theme["text"]}" font-family="Inter, sans-serif" font-size="{font_size:.1f}">
    {labels_svg}
  </g>
    {path_svg}
    {dots_svg}
    {marker_svg}
  </g>
</svg>
"""
