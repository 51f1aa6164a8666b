import math

from geoencode.codec._angles import (
    is_pole,
    quantize_latitude,
    quantize_longitude,
    split_angle,
    wrap_longitude,
)
from geoencode.errors.range_errors import (
    LatitudeOutOfRangeError,
    LongitudeNotFiniteError,
)
from geoencode.types.geo import LAT_DEGREE_RADIX, LatLongCoord


def _quantize(lat: float, lon: float) -> tuple[int, int]:
    # Written as a negated range test so that NaN is rejected too
    if not (-90.0 <= lat <= 90.0):
        raise LatitudeOutOfRangeError(lat)
    if not math.isfinite(lon):
        raise LongitudeNotFiniteError(lon)

    lat_units = quantize_latitude(lat)
    # Longitude is meaningless at a pole and must not leak into the key
    if is_pole(lat_units):
        return lat_units, 0
    return lat_units, quantize_longitude(wrap_longitude(lon))


def _pack(lat_units: int, lon_units: int) -> bytes:
    lat_dms = split_angle(lat_units)
    lon_dms = split_angle(lon_units)

    # 0..180 * 360 + 359 = 0..65159, stored big-endian
    dd = lat_dms.degrees + lon_dms.degrees * LAT_DEGREE_RADIX
    return bytes(
        (
            dd >> 8,
            dd & 0xFF,
            ((lat_dms.minutes // 4) << 4) | (lon_dms.minutes // 4),
            ((lat_dms.minutes % 4) << 6)
            | ((lon_dms.minutes % 4) << 4)
            | ((lat_dms.seconds // 15) << 2)
            | (lon_dms.seconds // 15),
            ((lat_dms.seconds % 15) << 4) | (lon_dms.seconds % 15),
            (lat_dms.sixteenths << 4) | lon_dms.sixteenths,
        )
    )


def encode(lat: float, lon: float) -> bytes:
    """Encode a coordinate as 6 bytes.

    Each byte after the first two adds precision to both axes, so any prefix
    of 2 to 5 bytes is itself a valid, coarser encoding and sorts as an index
    key.

    Args:
        lat: Latitude in degrees, from -90 to 90.
        lon: Longitude in degrees. Any finite value is accepted and wrapped to
            the range 0 <= lon < 360.

    Returns:
        The 6-byte encoding.

    Raises:
        LatitudeOutOfRangeError: If the latitude is outside [-90, 90].
        LongitudeNotFiniteError: If the longitude is infinite or NaN.
    """
    return _pack(*_quantize(lat, lon))


def encode_into(buffer: bytearray, lat: float, lon: float) -> bytearray:
    """Append the 6-byte encoding of a coordinate to ``buffer``.

    The buffer is left unmodified if the coordinate cannot be encoded.
    """
    buffer += _pack(*_quantize(lat, lon))
    return buffer


def encode_coord(coord: LatLongCoord) -> bytes:
    return encode(coord.lat, coord.lon)
