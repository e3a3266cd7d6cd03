"""Solar position model — Spencer Fourier series for declination and equation of time.

Accuracy is on the order of 0.01°–0.5°, enough for plotting an analemma.
The UTC offset is approximated from longitude (15° per hour), no timezone
database is consulted. Pure functions only: the caller supplies the day of
year and clock time explicitly.
"""

import math

from analemma.models import ClockTime, SolarPosition

# Below this the azimuth formula's denominator is treated as zero (pole or zenith).
_DEGENERATE_EPS = 1e-12


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


def fractional_year(day_of_year: int) -> float:
    """Fractional-year angle in radians."""
    return 2 * math.pi * (day_of_year - 1) / 365


def declination(day_of_year: int) -> float:
    """Solar declination in radians."""
    x = fractional_year(day_of_year)
    return (
        0.006918
        - 0.399912 * math.cos(x)
        + 0.070257 * math.sin(x)
        - 0.006758 * math.cos(2 * x)
        + 0.000907 * math.sin(2 * x)
        - 0.002697 * math.cos(3 * x)
        + 0.00148 * math.sin(3 * x)
    )


def equation_of_time(day_of_year: int) -> float:
    """Equation of time in minutes (apparent minus mean solar time)."""
    x = fractional_year(day_of_year)
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(x)
        - 0.032077 * math.sin(x)
        - 0.014615 * math.cos(2 * x)
        - 0.040849 * math.sin(2 * x)
    )


def zone_offset_hours(longitude: float) -> int:
    """Civil UTC offset approximated from longitude, rounding halves up."""
    return math.floor(longitude / 15 + 0.5)


def solar_time(longitude: float, day_of_year: int, clock_hours: float) -> float:
    """True solar time in hours for a local clock reading."""
    zone_correction = (longitude - 15 * zone_offset_hours(longitude)) * 4 / 60
    return clock_hours + equation_of_time(day_of_year) / 60 + zone_correction


def hour_angle(longitude: float, day_of_year: int, clock_hours: float) -> float:
    """Hour angle in degrees within [-180, 180), negative before solar noon."""
    ha = 15 * (solar_time(longitude, day_of_year, clock_hours) - 12)
    return (ha + 180) % 360 - 180


def solar_noon(longitude: float, day_of_year: int) -> float:
    """Local clock time (decimal hours) at which the hour angle is zero."""
    return 12 - solar_time(longitude, day_of_year, 0.0)


def position_at(
    latitude: float, longitude: float, day_of_year: int, clock_hours: float
) -> SolarPosition:
    """Sun position for a clock time given in decimal hours.

    Args:
        latitude: Observer latitude in degrees (positive north).
        longitude: Observer longitude in degrees (positive east).
        day_of_year: Ordinal day, 1-366.
        clock_hours: Local clock time in hours since midnight.

    Returns:
        SolarPosition with azimuth in [0, 360) and altitude in [-90, 90].
        Below-horizon positions are returned as-is.
    """
    dec = declination(day_of_year)
    ha = hour_angle(longitude, day_of_year, clock_hours)
    ha_rad = math.radians(ha)
    lat_rad = math.radians(latitude)

    sin_alt = _clamp(
        math.sin(lat_rad) * math.sin(dec)
        + math.cos(lat_rad) * math.cos(dec) * math.cos(ha_rad)
    )
    alt_rad = math.asin(sin_alt)

    denom = math.cos(lat_rad) * math.cos(alt_rad)
    if abs(denom) < _DEGENERATE_EPS:
        azimuth = 0.0
    else:
        cos_az = _clamp((math.sin(dec) - math.sin(lat_rad) * sin_alt) / denom)
        azimuth = math.degrees(math.acos(cos_az))
        # acos cannot tell morning from afternoon
        if ha > 0:
            azimuth = 360 - azimuth

    return SolarPosition(
        azimuth_deg=azimuth % 360,
        altitude_deg=math.degrees(alt_rad),
    )


def position(
    latitude: float, longitude: float, day_of_year: int, clock: ClockTime
) -> SolarPosition:
    """Sun position for a local clock reading on a given day of year."""
    return position_at(latitude, longitude, day_of_year, clock.decimal_hours)
