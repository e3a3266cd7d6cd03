"""Chart projection — (azimuth, altitude) to plot-area pixels with a data-driven altitude axis."""

from collections.abc import Iterable

import numpy as np

from analemma.models import ChartScale, HourTrace, ProjectedPoint, SolarPosition

MIN_ALTITUDE_AXIS_DEG = 60.0
ALTITUDE_STEP_DEG = 10
AZIMUTH_STEP_DEG = 30

_COMPASS = {0: "N", 90: "E", 180: "S", 270: "W", 360: "N"}


def is_rendered(position: SolarPosition, include_below_horizon: bool) -> bool:
    """Whether a point is drawn in the given display mode."""
    return include_below_horizon or position.above_horizon


def project(
    position: SolarPosition, scale: ChartScale, width: float, height: float
) -> ProjectedPoint:
    """Map a sun position into the plot area.

    x runs 0 → width over azimuth 0° → 360°. y is negative upward from the
    bottom-left origin, reaching -height at scale.max_altitude_deg.
    """
    return ProjectedPoint(
        x=position.azimuth_deg / 360 * width,
        y=-(position.altitude_deg / scale.max_altitude_deg) * height,
    )


def compute_scale(
    traces: Iterable[HourTrace], include_below_horizon: bool = False
) -> ChartScale:
    """Derive the altitude axis bound from the points that will be rendered.

    Each altitude is rounded up to the next multiple of 10°; the bound never
    drops below 60°.
    """
    altitudes = np.fromiter(
        (
            p.altitude_deg
            for trace in traces
            for p in trace.points
            if is_rendered(p, include_below_horizon)
        ),
        dtype=float,
    )
    if altitudes.size == 0:
        return ChartScale(max_altitude_deg=MIN_ALTITUDE_AXIS_DEG)
    top = float(np.ceil(altitudes.max() / ALTITUDE_STEP_DEG) * ALTITUDE_STEP_DEG)
    return ChartScale(max_altitude_deg=max(MIN_ALTITUDE_AXIS_DEG, top))


def project_trace(
    trace: HourTrace,
    scale: ChartScale,
    width: float,
    height: float,
    include_below_horizon: bool = False,
) -> tuple[ProjectedPoint, ...]:
    """Project the rendered points of one trace, preserving day order."""
    return tuple(
        project(p, scale, width, height)
        for p in trace.points
        if is_rendered(p, include_below_horizon)
    )


def project_traces(
    traces: Iterable[HourTrace],
    scale: ChartScale,
    width: float,
    height: float,
    include_below_horizon: bool = False,
) -> dict[str, tuple[ProjectedPoint, ...]]:
    """Project every trace. Keys keep the input (hour) order."""
    return {
        trace.hour_label: project_trace(
            trace, scale, width, height, include_below_horizon
        )
        for trace in traces
    }


def altitude_ticks(scale: ChartScale) -> tuple[int, ...]:
    """Horizontal grid lines, 0° up to the axis bound."""
    return tuple(range(0, int(scale.max_altitude_deg) + 1, ALTITUDE_STEP_DEG))


def azimuth_ticks() -> tuple[tuple[int, str], ...]:
    """Vertical grid lines as (azimuth, label); only cardinal directions are labelled."""
    return tuple(
        (az, _COMPASS.get(az, "")) for az in range(0, 361, AZIMUTH_STEP_DEG)
    )
