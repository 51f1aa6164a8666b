import math

from geoencode.types.geo import (
    LAT_UNITS_MAX,
    LON_UNITS_FULL_TURN,
    UNITS_PER_DEGREE,
    UNITS_PER_MINUTE,
    UNITS_PER_SECOND,
    DegreesMinutesSeconds,
)


def split_angle(units: int) -> DegreesMinutesSeconds:
    """Split a non-negative count of 1/16 arcseconds into its components.

    Latitudes are shifted so that 0 is the south pole, which keeps both axes
    non-negative: 0..10_368_000 for latitude, 0..20_735_999 for longitude.
    """
    degrees, rest = divmod(units, UNITS_PER_DEGREE)
    minutes, rest = divmod(rest, UNITS_PER_MINUTE)
    seconds, sixteenths = divmod(rest, UNITS_PER_SECOND)
    return DegreesMinutesSeconds(degrees, minutes, seconds, sixteenths)


def round_half_away(value: float) -> int:
    """Round a non-negative float to the nearest integer, ties away from zero.

    ``value - floor(value)`` is exact in binary floating point, so ties are
    detected without the error that ``floor(value + 0.5)`` introduces.
    """
    whole = math.floor(value)
    if value - whole >= 0.5:
        return whole + 1
    return whole


def wrap_longitude(lon: float) -> float:
    lon = math.fmod(lon, 360.0)
    if lon < 0:
        lon += 360.0
    return lon


def quantize_latitude(lat: float) -> int:
    return round_half_away((lat + 90.0) * UNITS_PER_DEGREE)


def quantize_longitude(lon: float) -> int:
    """Quantize a longitude already wrapped to [0, 360)."""
    units = round_half_away(lon * UNITS_PER_DEGREE)
    if units == LON_UNITS_FULL_TURN:
        return 0
    return units


def is_pole(lat_units: int) -> bool:
    return lat_units == 0 or lat_units == LAT_UNITS_MAX
