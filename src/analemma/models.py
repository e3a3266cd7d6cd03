"""Data model definitions — explicit boundaries between input, compute, and render layers."""

import math
from dataclasses import dataclass


class DomainError(ValueError):
    """Input outside the model's declared domain."""


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer location. Supplied by the location picker, read-only to the core."""

    latitude: float  # Decimal degrees, positive north
    longitude: float  # Decimal degrees, positive east

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not -90 <= self.latitude <= 90:
            raise DomainError(f"latitude out of range: {self.latitude}")
        if not math.isfinite(self.longitude) or not -180 <= self.longitude <= 180:
            raise DomainError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class ClockTime:
    """Local clock reading at the observer's location (not UTC)."""

    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise DomainError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise DomainError(f"minute out of range: {self.minute}")

    @classmethod
    def parse(cls, text: str) -> "ClockTime":
        """Parse an "HH:MM" string.

        Raises:
            DomainError: When the string is malformed or out of range.
        """
        hh, sep, mm = text.strip().partition(":")
        if not sep or not hh.isdigit() or not mm.isdigit():
            raise DomainError(f"expected HH:MM, got {text!r}")
        return cls(hour=int(hh), minute=int(mm))

    @property
    def label(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @property
    def decimal_hours(self) -> float:
        return self.hour + self.minute / 60


@dataclass(frozen=True)
class SolarPosition:
    """Apparent sun position for one (location, day, time) triple."""

    azimuth_deg: float  # Clockwise from true north, [0, 360)
    altitude_deg: float  # Above horizon, negative below

    @property
    def above_horizon(self) -> bool:
        return self.altitude_deg > 0


@dataclass(frozen=True)
class HourTrace:
    """Sun positions at one clock hour for every day of the reference year."""

    hour_label: str  # "HH:00"
    points: tuple[SolarPosition, ...]  # Index i = day of year i + 1, unfiltered

    def point_for_day(self, day_of_year: int) -> SolarPosition:
        """Return the point for a day of year. Day 366 maps onto the last point."""
        if not 1 <= day_of_year <= 366:
            raise DomainError(f"day of year out of range: {day_of_year}")
        return self.points[min(day_of_year, len(self.points)) - 1]


@dataclass(frozen=True)
class ChartScale:
    """Altitude axis bound, derived from the rendered data."""

    max_altitude_deg: float


@dataclass(frozen=True)
class ProjectedPoint:
    """Chart-local pixel position. Origin bottom-left of the plot area, y grows downward."""

    x: float
    y: float


@dataclass(frozen=True)
class ChartLayout:
    """Plot area placed inside a canvas with a uniform margin."""

    canvas_width: float
    canvas_height: float
    margin: float

    @classmethod
    def from_canvas(
        cls, width: float, height: float, margin_fraction: float = 0.08
    ) -> "ChartLayout":
        """Build a layout whose margin is a fraction of the smaller canvas side."""
        return cls(
            canvas_width=width,
            canvas_height=height,
            margin=min(width, height) * margin_fraction,
        )

    @property
    def width(self) -> float:
        return self.canvas_width - 2 * self.margin

    @property
    def height(self) -> float:
        return self.canvas_height - 2 * self.margin

    def to_chart(self, canvas_x: float, canvas_y: float) -> ProjectedPoint:
        """Convert a canvas pointer position (origin top-left) to chart-local coordinates."""
        return ProjectedPoint(
            x=canvas_x - self.margin,
            y=canvas_y - (self.canvas_height - self.margin),
        )

    def to_canvas(self, point: ProjectedPoint) -> tuple[float, float]:
        """Inverse of to_chart."""
        return point.x + self.margin, point.y + self.canvas_height - self.margin

    def hit_threshold(self, fraction: float = 0.05) -> float:
        """Pointer distance (px) under which a click selects a curve."""
        return min(self.canvas_width, self.canvas_height) * fraction


@dataclass(frozen=True)
class ChartData:
    """The sole input to renderers. Fully computed state."""

    coordinate: GeoCoordinate
    selected: str  # Highlighted hour label
    traces: tuple[HourTrace, ...]  # 24 traces in hour order
    scale: ChartScale
    show_below_horizon: bool
    day_path: tuple[SolarPosition, ...] | None = None  # Today's 15-minute path
    today_point: SolarPosition | None = None  # Selected hour, today's day of year
