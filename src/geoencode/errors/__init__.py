from geoencode.errors.geoencode_error import GeoEncodeError
from geoencode.errors.range_errors import (
    LatitudeOutOfRangeError,
    LongitudeNotFiniteError,
)

__all__ = ["GeoEncodeError", "LatitudeOutOfRangeError", "LongitudeNotFiniteError"]
