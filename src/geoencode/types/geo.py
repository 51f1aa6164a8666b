from dataclasses import dataclass as std_dataclass

from pydantic.dataclasses import dataclass

# Quantization grid: 1/16 of an arcsecond
UNITS_PER_SECOND = 16
UNITS_PER_MINUTE = 60 * UNITS_PER_SECOND
UNITS_PER_DEGREE = 3600 * UNITS_PER_SECOND

LAT_UNITS_MAX = 180 * UNITS_PER_DEGREE
LON_UNITS_FULL_TURN = 360 * UNITS_PER_DEGREE

# Latitude degrees never exceed 180, so 181 keeps the composite index unique
LAT_DEGREE_RADIX = 181

ENCODED_LENGTH = 6
MIN_ENCODED_LENGTH = 2


@dataclass(frozen=True)
class LatLongCoord:
    """A latitude/longitude coordinate in degrees.

    Attributes:
        lat: Latitude, from -90 (south pole) to 90 (north pole).
        lon: Longitude. Decoded values are in the range 0 <= lon < 360; any
            finite value is accepted for encoding and wrapped.

    No range constraints are enforced here: decoding a malformed buffer can
    yield a latitude outside [-90, 90], and that is a defined result.
    """

    lat: float
    lon: float


@std_dataclass(frozen=True)
class DegreesMinutesSeconds:
    degrees: int
    minutes: int
    seconds: int
    sixteenths: int
