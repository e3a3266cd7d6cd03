"""Environment-driven settings. Entry points call load_dotenv() before load_settings()."""

import os
from dataclasses import dataclass

from analemma.models import ClockTime, DomainError, GeoCoordinate

# Stockholm
_DEFAULT_LATITUDE = 59.3293
_DEFAULT_LONGITUDE = 18.0686

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Malformed configuration value."""


@dataclass(frozen=True)
class Settings:
    location: GeoCoordinate
    hour: str  # "HH:00"
    show_below_horizon: bool
    show_today_path: bool
    margin_fraction: float
    hit_fraction: float
    workers: int
    log_level: str


def _float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name}: not a number: {raw!r}") from e


def _int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name}: not an integer: {raw!r}") from e


def _bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name}: not a boolean: {raw!r}")


def _fraction(name: str, default: float) -> float:
    value = _float(name, default)
    if not 0 < value < 0.5:
        raise ConfigError(f"{name}: must be between 0 and 0.5, got {value}")
    return value


def load_settings() -> Settings:
    """Read ANALEMMA_* environment variables.

    Raises:
        ConfigError: When a variable is set but malformed or out of range.
    """
    try:
        location = GeoCoordinate(
            latitude=_float("ANALEMMA_LATITUDE", _DEFAULT_LATITUDE),
            longitude=_float("ANALEMMA_LONGITUDE", _DEFAULT_LONGITUDE),
        )
        hour = ClockTime.parse(os.environ.get("ANALEMMA_HOUR", "12:00")).label
    except DomainError as e:
        raise ConfigError(str(e)) from e

    workers = _int("ANALEMMA_WORKERS", 0)
    if workers < 0:
        raise ConfigError(f"ANALEMMA_WORKERS: must be >= 0, got {workers}")

    return Settings(
        location=location,
        hour=hour,
        show_below_horizon=_bool("ANALEMMA_SHOW_BELOW_HORIZON", False),
        show_today_path=_bool("ANALEMMA_SHOW_TODAY_PATH", False),
        margin_fraction=_fraction("ANALEMMA_MARGIN_FRACTION", 0.08),
        hit_fraction=_fraction("ANALEMMA_HIT_FRACTION", 0.05),
        workers=workers,
        log_level=os.environ.get("ANALEMMA_LOG_LEVEL", "WARNING").upper(),
    )
