"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from analemma.models import ChartData, ChartLayout
from analemma.projection import (
    altitude_ticks,
    azimuth_ticks,
    project,
    project_traces,
)

_ROOT = Path(__file__).parent.parent.parent.parent
RESULTS_DIR = _ROOT / "results"
_DPI = 100


def render_static_chart(
    chart: ChartData,
    width: int = 1000,
    height: int = 600,
    dark: bool = False,
    margin_fraction: float = 0.08,
) -> Figure:
    """Render ChartData as a static matplotlib image.

    Args:
        chart: Fully computed chart data.
        width: Output width in pixels.
        height: Output height in pixels.
        dark: Use the dark color theme.
        margin_fraction: Margin around the plot area, relative to the smaller side.

    Returns:
        matplotlib Figure object.
    """
    bg, grid, text, dot = (
        ("#121212", "#404040", "#a3a3a3", "#525252")
        if dark
        else ("#fafafa", "#e5e5e5", "#737373", "#d4d4d4")
    )
    layout = ChartLayout.from_canvas(width, height, margin_fraction)
    pw, ph = layout.width, layout.height

    fig = plt.figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
    fig.patch.set_facecolor(bg)
    # Axes fill exactly the plot area
    ax = fig.add_axes(
        (layout.margin / width, layout.margin / height, pw / width, ph / height)
    )
    ax.set_facecolor(bg)

    for alt in altitude_ticks(chart.scale):
        y = -(alt / chart.scale.max_altitude_deg) * ph
        ax.axhline(y, color=grid, linewidth=1, zorder=0)
        ax.text(-5, y, f"{alt}°", color=text, ha="right", va="center", fontsize=9)
    for az, name in azimuth_ticks():
        x = az / 360 * pw
        ax.axvline(x, color=grid, linewidth=1, zorder=0)
        if name:
            ax.text(x, 15, name, color=text, ha="center", va="top", fontsize=9)

    if chart.day_path is not None:
        # NaN breaks the line below the horizon
        pts = [
            project(p, chart.scale, pw, ph) if p.above_horizon else None
            for p in chart.day_path
        ]
        xs = np.array([p.x if p else np.nan for p in pts])
        ys = np.array([p.y if p else np.nan for p in pts])
        ax.plot(xs, ys, color="#fbbf24", linewidth=2, alpha=0.4 if dark else 0.6, zorder=1)

    projected = project_traces(
        chart.traces, chart.scale, pw, ph, chart.show_below_horizon
    )
    for label, points in projected.items():
        if not points:
            continue
        selected = label == chart.selected
        ax.scatter(
            [p.x for p in points],
            [p.y for p in points],
            s=9 if selected else 4,
            color="#dc2626" if selected else dot,
            linewidths=0,
            zorder=3 if selected else 2,
        )

    if chart.today_point is not None and chart.today_point.above_horizon:
        tp = project(chart.today_point, chart.scale, pw, ph)
        ax.scatter([tp.x], [tp.y], s=120, color="#fbbf24", alpha=0.35, linewidths=0, zorder=4)
        ax.scatter([tp.x], [tp.y], s=25, color="#fbbf24", linewidths=0, zorder=5)

    ax.set_xlim(0, pw)
    # Projected y is negative upward; put 0 at the bottom
    bottom = ph if chart.show_below_horizon else 0
    ax.set_ylim(bottom, -ph)
    ax.axis("off")

    return fig


def save_static_chart(
    chart: ChartData,
    output_path: Path | None = None,
    width: int = 1000,
    height: int = 600,
    dark: bool = False,
    margin_fraction: float = 0.08,
) -> Path:
    """Save ChartData as a PNG file.

    Args:
        chart: Fully computed chart data.
        output_path: Destination path. Auto-generated under results/ if None.
        width: Output width in pixels.
        height: Output height in pixels.
        dark: Use the dark color theme.
        margin_fraction: Margin around the plot area, relative to the smaller side.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = RESULTS_DIR / default_filename(chart, "png")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(chart, width, height, dark, margin_fraction)
    fig.savefig(output_path, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path


def default_filename(chart: ChartData, suffix: str) -> str:
    """File name derived from location and selected hour."""
    c = chart.coordinate
    return (
        f"analemma__{c.latitude:.4f}_{c.longitude:.4f}__{chart.selected}.{suffix}"
    ).replace(":", "_")
