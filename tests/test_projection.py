"""Tests for chart projection, scaling and layout."""

import pytest

from analemma.models import (
    ChartLayout,
    ChartScale,
    HourTrace,
    ProjectedPoint,
    SolarPosition,
)
from analemma.projection import (
    altitude_ticks,
    azimuth_ticks,
    compute_scale,
    project,
    project_trace,
    project_traces,
)


def _trace(label: str, altitudes: list[float]) -> HourTrace:
    return HourTrace(
        hour_label=label,
        points=tuple(
            SolarPosition(azimuth_deg=float(i), altitude_deg=a)
            for i, a in enumerate(altitudes)
        ),
    )


class TestProject:
    def test_horizon_south(self):
        point = project(
            SolarPosition(azimuth_deg=180, altitude_deg=0),
            ChartScale(max_altitude_deg=60),
            360,
            100,
        )
        assert point == ProjectedPoint(x=180, y=0)

    def test_top_of_axis(self):
        point = project(
            SolarPosition(azimuth_deg=90, altitude_deg=60),
            ChartScale(max_altitude_deg=60),
            400,
            200,
        )
        assert point.x == pytest.approx(100)
        assert point.y == pytest.approx(-200)

    def test_below_horizon_is_positive_y(self):
        point = project(
            SolarPosition(azimuth_deg=0, altitude_deg=-30),
            ChartScale(max_altitude_deg=60),
            360,
            100,
        )
        assert point.y == pytest.approx(50)


class TestComputeScale:
    def test_floor_of_60(self):
        assert compute_scale([_trace("12:00", [10, 25, 41])]).max_altitude_deg == 60

    def test_rounds_up_to_ten(self):
        traces = [_trace("11:00", [10, 54]), _trace("12:00", [61.2, 3])]
        assert compute_scale(traces).max_altitude_deg == 70

    def test_exact_multiple(self):
        assert compute_scale([_trace("12:00", [80.0])]).max_altitude_deg == 80

    def test_only_rendered_points(self):
        # Nothing above the horizon, below-horizon hidden
        assert compute_scale([_trace("00:00", [-40, -10])]).max_altitude_deg == 60

    def test_below_horizon_included(self):
        traces = [_trace("00:00", [-75, -10]), _trace("12:00", [20, 67])]
        hidden = compute_scale(traces)
        shown = compute_scale(traces, include_below_horizon=True)
        # Negative altitudes never raise the upper bound
        assert hidden.max_altitude_deg == shown.max_altitude_deg == 70
        scale = ChartScale(max_altitude_deg=70)
        assert len(project_trace(traces[0], scale, 360, 70)) == 0
        below = project_trace(traces[0], scale, 360, 70, include_below_horizon=True)
        assert [p.y for p in below] == pytest.approx([75, 10])

    def test_only_below_horizon_points_shown(self):
        traces = [_trace("00:00", [-75, -10])]
        assert compute_scale(traces, include_below_horizon=True).max_altitude_deg == 60

    def test_empty(self):
        assert compute_scale([]).max_altitude_deg == 60


class TestProjectTraces:
    def test_filters_below_horizon(self):
        trace = _trace("06:00", [-5, 0, 5, 10])
        scale = ChartScale(max_altitude_deg=60)
        assert len(project_trace(trace, scale, 360, 60)) == 2
        assert len(project_trace(trace, scale, 360, 60, include_below_horizon=True)) == 4

    def test_keeps_day_order(self):
        trace = _trace("09:00", [5, 10, 15])
        points = project_trace(trace, ChartScale(max_altitude_deg=60), 360, 60)
        assert [p.x for p in points] == [0, 1, 2]

    def test_keyed_by_hour(self):
        traces = [_trace("10:00", [5]), _trace("11:00", [6])]
        projected = project_traces(traces, ChartScale(max_altitude_deg=60), 360, 60)
        assert list(projected) == ["10:00", "11:00"]


class TestTicks:
    def test_altitude_ticks(self):
        assert altitude_ticks(ChartScale(max_altitude_deg=70)) == (0, 10, 20, 30, 40, 50, 60, 70)

    def test_azimuth_ticks(self):
        ticks = dict(azimuth_ticks())
        assert len(ticks) == 13
        assert ticks[0] == "N" and ticks[90] == "E" and ticks[180] == "S" and ticks[270] == "W"
        assert ticks[30] == ""


class TestChartLayout:
    def test_margin_from_smaller_side(self):
        layout = ChartLayout.from_canvas(1000, 500)
        assert layout.margin == pytest.approx(40)
        assert layout.width == pytest.approx(920)
        assert layout.height == pytest.approx(420)

    def test_pointer_conversion_round_trip(self):
        layout = ChartLayout.from_canvas(1000, 500)
        # Bottom-left of the plot area
        origin = layout.to_chart(40, 460)
        assert (origin.x, origin.y) == pytest.approx((0, 0))
        # Top-left of the plot area
        assert layout.to_chart(40, 40).y == pytest.approx(-420)
        assert layout.to_canvas(ProjectedPoint(x=10, y=-20)) == pytest.approx((50, 440))

    def test_hit_threshold(self):
        assert ChartLayout.from_canvas(1000, 500).hit_threshold() == pytest.approx(25)
