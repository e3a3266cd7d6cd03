"""Tests for pointer hit-testing."""

from analemma.compute import TraceCache
from analemma.hittest import nearest, select_hour
from analemma.models import ChartLayout, GeoCoordinate, ProjectedPoint
from analemma.projection import compute_scale, project_traces


def _pt(x, y):
    return ProjectedPoint(x=x, y=y)


class TestNearest:
    def test_none_when_far(self):
        projected = {"10:00": (_pt(0, 0), _pt(10, -10)), "11:00": (_pt(100, -50),)}
        assert nearest(_pt(500, -500), projected, threshold_px=20) is None

    def test_exact_hit(self):
        projected = {"10:00": (_pt(0, 0), _pt(10, -10)), "11:00": (_pt(100, -50),)}
        assert nearest(_pt(100, -50), projected, threshold_px=20) == "11:00"

    def test_closest_wins(self):
        projected = {"10:00": (_pt(0, 0),), "11:00": (_pt(6, 0),)}
        assert nearest(_pt(4, 0), projected, threshold_px=20) == "11:00"

    def test_threshold_is_strict(self):
        projected = {"10:00": (_pt(0, 0),)}
        assert nearest(_pt(3, 4), projected, threshold_px=5) is None
        assert nearest(_pt(3, 4), projected, threshold_px=5.01) == "10:00"

    def test_tie_goes_to_first_hour(self):
        projected = {"10:00": (_pt(-1, 0),), "11:00": (_pt(1, 0),)}
        assert nearest(_pt(0, 0), projected, threshold_px=5) == "10:00"

    def test_empty_traces_skipped(self):
        projected = {"00:00": (), "01:00": (_pt(1, 1),)}
        assert nearest(_pt(0, 0), projected, threshold_px=5) == "01:00"


class TestSelectHour:
    def test_keeps_current_on_miss(self):
        projected = {"10:00": (_pt(0, 0),)}
        assert select_hour(_pt(900, 900), projected, 10, current="12:00") == "12:00"

    def test_switches_on_hit(self):
        projected = {"10:00": (_pt(0, 0),)}
        assert select_hour(_pt(1, 1), projected, 10, current="12:00") == "10:00"


class TestRealChart:
    def test_click_on_projected_point_selects_its_hour(self):
        cache = TraceCache(GeoCoordinate(latitude=59.3293, longitude=18.0686))
        traces = cache.traces()
        scale = compute_scale(traces)
        layout = ChartLayout.from_canvas(1000, 600)
        projected = project_traces(traces, scale, layout.width, layout.height)

        target = projected["15:00"][100]
        canvas_x, canvas_y = layout.to_canvas(target)
        pointer = layout.to_chart(canvas_x, canvas_y)
        assert nearest(pointer, projected, layout.hit_threshold()) == "15:00"
