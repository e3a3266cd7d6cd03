"""Analemma computation layer — per-hour trace generation, trace caching, and chart data assembly."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime

from analemma import solar
from analemma.models import (
    ChartData,
    ClockTime,
    DomainError,
    GeoCoordinate,
    HourTrace,
    SolarPosition,
)
from analemma.projection import compute_scale

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
HOUR_LABELS: tuple[str, ...] = tuple(f"{h:02d}:00" for h in range(24))


def day_of_year(when: date) -> int:
    """Ordinal day within the calendar year (1-366)."""
    return when.timetuple().tm_yday


def generate_trace(latitude: float, longitude: float, clock: ClockTime) -> HourTrace:
    """Compute the analemma for one clock time.

    Every day of the reference year is evaluated in order; below-horizon
    points are kept so the day index stays aligned with the point index.

    Args:
        latitude: Observer latitude in degrees.
        longitude: Observer longitude in degrees.
        clock: Local clock time the curve is drawn for.

    Returns:
        HourTrace with exactly 365 points, day 1 first.
    """
    points = tuple(
        solar.position(latitude, longitude, day, clock)
        for day in range(1, DAYS_PER_YEAR + 1)
    )
    logger.debug(
        "Generated %d points (%d above horizon) for %s at %.4f, %.4f",
        len(points),
        sum(p.above_horizon for p in points),
        clock.label,
        latitude,
        longitude,
    )
    return HourTrace(hour_label=clock.label, points=points)


def day_path(
    latitude: float, longitude: float, day: int, step_minutes: int = 15
) -> tuple[SolarPosition, ...]:
    """Sun positions over one day at a fixed step, starting at 00:00."""
    if not 1 <= day <= 366:
        raise DomainError(f"day of year out of range: {day}")
    if step_minutes <= 0 or 1440 % step_minutes:
        raise DomainError(f"step must divide a day evenly: {step_minutes}")
    return tuple(
        solar.position_at(latitude, longitude, day, minutes / 60)
        for minutes in range(0, 24 * 60, step_minutes)
    )


class TraceCache:
    """Hour label -> HourTrace store for a single location.

    Entries are generated on first access. Every entry depends on the same
    coordinate, so a location change drops all of them at once.
    """

    def __init__(self, coordinate: GeoCoordinate) -> None:
        self._coordinate = coordinate
        self._entries: dict[str, HourTrace] = {}

    @property
    def coordinate(self) -> GeoCoordinate:
        return self._coordinate

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, hour_label: object) -> bool:
        return hour_label in self._entries

    def invalidate(self) -> None:
        logger.debug("Dropping %d cached traces", len(self._entries))
        self._entries.clear()

    def relocate(self, coordinate: GeoCoordinate) -> None:
        """Switch to a new location, invalidating when it differs from the current one."""
        if coordinate == self._coordinate:
            return
        logger.info(
            "Location changed to %.4f, %.4f", coordinate.latitude, coordinate.longitude
        )
        self._coordinate = coordinate
        self.invalidate()

    def _generate(self, hour_label: str) -> HourTrace:
        return generate_trace(
            self._coordinate.latitude,
            self._coordinate.longitude,
            ClockTime.parse(hour_label),
        )

    def get(self, hour_label: str) -> HourTrace:
        """Return the trace for an "HH:MM" label, generating it on first request.

        Raises:
            DomainError: When the label is not a valid clock time.
        """
        trace = self._entries.get(hour_label)
        if trace is None:
            trace = self._generate(hour_label)
            self._entries[hour_label] = trace
        return trace

    def traces(self, workers: int = 0) -> tuple[HourTrace, ...]:
        """Return all 24 hour traces in hour order.

        Args:
            workers: When > 0, missing hours are generated in a thread pool
                of this size. Output is identical either way.
        """
        missing = [label for label in HOUR_LABELS if label not in self._entries]
        if workers > 0 and len(missing) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                for trace in pool.map(self._generate, missing):
                    self._entries[trace.hour_label] = trace
        return tuple(self.get(label) for label in HOUR_LABELS)


def build_chart_data(
    cache: TraceCache,
    selected: str,
    show_below_horizon: bool = False,
    now: datetime | None = None,
    show_today_path: bool = False,
    workers: int = 0,
) -> ChartData:
    """Top-level entry point: assemble everything a renderer needs.

    Args:
        cache: Trace cache already positioned on the observer's location.
        selected: Selected hour label ("HH:00").
        show_below_horizon: Whether below-horizon points are rendered.
        now: Current local date/time. Enables today's marker (and path when
            show_today_path is set). The model never reads the clock itself.
        show_today_path: Whether to include today's 15-minute sun path.
        workers: Thread pool size for generating missing traces.

    Returns:
        Fully computed ChartData.
    """
    ClockTime.parse(selected)
    traces = cache.traces(workers=workers)
    scale = compute_scale(traces, include_below_horizon=show_below_horizon)

    path: tuple[SolarPosition, ...] | None = None
    today_point: SolarPosition | None = None
    if now is not None:
        today = day_of_year(now)
        coordinate = cache.coordinate
        if show_today_path:
            path = day_path(coordinate.latitude, coordinate.longitude, today)
        today_point = cache.get(selected).point_for_day(today)

    return ChartData(
        coordinate=cache.coordinate,
        selected=selected,
        traces=traces,
        scale=scale,
        show_below_horizon=show_below_horizon,
        day_path=path,
        today_point=today_point,
    )
