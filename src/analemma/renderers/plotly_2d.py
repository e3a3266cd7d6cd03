"""Plotly 2D interactive analemma chart renderer.

Azimuth on x (0°–360°), altitude on y up to the chart's computed scale.
Each hour is a separate marker trace whose name is its hour label, so a
point selection can be mapped back to an hour.
"""

import plotly.graph_objects as go

from analemma.models import ChartData, ChartLayout, SolarPosition
from analemma.projection import altitude_ticks, azimuth_ticks, is_rendered

_SELECTED_COLOR = "#dc2626"
_TODAY_COLOR = "#fbbf24"

_THEMES = {
    False: {"bg": "#fafafa", "grid": "#e5e5e5", "text": "#737373", "dot": "#d4d4d4"},
    True: {"bg": "#121212", "grid": "#404040", "text": "#a3a3a3", "dot": "#525252"},
}


def _xy(
    points: tuple[SolarPosition, ...], include_below_horizon: bool
) -> tuple[list[float], list[float]]:
    visible = [p for p in points if is_rendered(p, include_below_horizon)]
    return [p.azimuth_deg for p in visible], [p.altitude_deg for p in visible]


def render_plotly_chart(
    chart: ChartData, dark: bool = False, layout: ChartLayout | None = None
) -> go.Figure:
    """Render ChartData as a Plotly figure.

    Args:
        chart: Fully computed chart data.
        dark: Use the dark color theme.
        layout: Canvas size and margin. The plot area matches the pixel
            space used for hit-testing. Defaults to a 1000x600 canvas.

    Returns:
        Plotly Figure object.
    """
    if layout is None:
        layout = ChartLayout.from_canvas(1000, 600)
    theme = _THEMES[dark]
    data: list[go.Scatter] = []

    # Today's path below the hour curves, drawn only above the horizon
    if chart.day_path is not None:
        x, y = _xy(chart.day_path, include_below_horizon=False)
        data.append(
            go.Scatter(
                x=x,
                y=y,
                mode="lines",
                line=dict(color=_TODAY_COLOR, width=2),
                opacity=0.4 if dark else 0.6,
                hoverinfo="skip",
                name="today",
            )
        )

    selected_trace: go.Scatter | None = None
    for trace in chart.traces:
        x, y = _xy(trace.points, chart.show_below_horizon)
        is_selected = trace.hour_label == chart.selected
        scatter = go.Scatter(
            x=x,
            y=y,
            mode="markers",
            marker=dict(
                size=5 if is_selected else 4,
                color=_SELECTED_COLOR if is_selected else theme["dot"],
                line=dict(width=0),
            ),
            name=trace.hour_label,
            hovertemplate=f"{trace.hour_label}<br>%{{x:.1f}}°, %{{y:.1f}}°<extra></extra>",
        )
        if is_selected:
            selected_trace = scatter
        else:
            data.append(scatter)
    # Selected hour last so it draws on top
    if selected_trace is not None:
        data.append(selected_trace)

    if chart.today_point is not None and chart.today_point.above_horizon:
        data.append(
            go.Scatter(
                x=[chart.today_point.azimuth_deg],
                y=[chart.today_point.altitude_deg],
                mode="markers",
                marker=dict(
                    size=12,
                    color=_TODAY_COLOR,
                    line=dict(width=4, color="rgba(251, 191, 36, 0.35)"),
                ),
                hoverinfo="skip",
                name="today_point",
            )
        )

    fig = go.Figure(data=data)

    az_ticks = azimuth_ticks()
    y_min = -chart.scale.max_altitude_deg if chart.show_below_horizon else 0.0
    fig.update_layout(
        paper_bgcolor=theme["bg"],
        plot_bgcolor=theme["bg"],
        showlegend=False,
        width=layout.canvas_width,
        height=layout.canvas_height,
        margin=dict(
            l=layout.margin, r=layout.margin, t=layout.margin, b=layout.margin, pad=0
        ),
        dragmode=False,
        clickmode="event+select",
        xaxis=dict(
            range=[0, 360],
            tickvals=[az for az, _ in az_ticks],
            ticktext=[label for _, label in az_ticks],
            gridcolor=theme["grid"],
            color=theme["text"],
            zeroline=False,
            fixedrange=True,
        ),
        yaxis=dict(
            range=[y_min, chart.scale.max_altitude_deg],
            tickvals=list(altitude_ticks(chart.scale)),
            ticksuffix="°",
            gridcolor=theme["grid"],
            color=theme["text"],
            zeroline=chart.show_below_horizon,
            zerolinecolor=theme["text"],
            fixedrange=True,
        ),
    )
    return fig
