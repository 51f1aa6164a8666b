"""Vectorised encoding and decoding of concatenated fixed-size records.

The functions here produce exactly the same bytes and floats as the scalar
``encode`` and ``decode``: the same rounding rule and the same sequence of
floating point operations are applied element-wise.
"""

import numpy as np

from geoencode.errors.range_errors import (
    LatitudeOutOfRangeError,
    LongitudeNotFiniteError,
)
from geoencode.logging import get_logger
from geoencode.types.geo import (
    ENCODED_LENGTH,
    LAT_DEGREE_RADIX,
    LAT_UNITS_MAX,
    LON_UNITS_FULL_TURN,
    MIN_ENCODED_LENGTH,
    UNITS_PER_DEGREE,
    UNITS_PER_MINUTE,
    UNITS_PER_SECOND,
)

logger = get_logger(__name__)


def _round_half_away(values: np.ndarray) -> np.ndarray:
    whole = np.floor(values)
    return (whole + (values - whole >= 0.5)).astype(np.int64)


def _split(units: np.ndarray) -> tuple[np.ndarray, ...]:
    degrees, rest = np.divmod(units, UNITS_PER_DEGREE)
    minutes, rest = np.divmod(rest, UNITS_PER_MINUTE)
    seconds, sixteenths = np.divmod(rest, UNITS_PER_SECOND)
    return degrees, minutes, seconds, sixteenths


def quantize_many(lats, lons) -> tuple[np.ndarray, np.ndarray]:
    """Quantize coordinate arrays to 1/16 arcsecond units.

    Raises:
        LatitudeOutOfRangeError: For the first latitude outside [-90, 90].
        LongitudeNotFiniteError: For the first infinite or NaN longitude.
    """
    lats, lons = np.broadcast_arrays(
        np.asarray(lats, dtype=np.float64), np.asarray(lons, dtype=np.float64)
    )
    lats = lats.ravel()
    lons = lons.ravel()

    bad_lat = ~((lats >= -90.0) & (lats <= 90.0))
    if bad_lat.any():
        raise LatitudeOutOfRangeError(float(lats[np.argmax(bad_lat)]))
    bad_lon = ~np.isfinite(lons)
    if bad_lon.any():
        raise LongitudeNotFiniteError(float(lons[np.argmax(bad_lon)]))

    lat_units = _round_half_away((lats + 90.0) * UNITS_PER_DEGREE)

    wrapped = np.fmod(lons, 360.0)
    wrapped = np.where(wrapped < 0, wrapped + 360.0, wrapped)
    lon_units = _round_half_away(wrapped * UNITS_PER_DEGREE)
    lon_units[lon_units == LON_UNITS_FULL_TURN] = 0
    lon_units[(lat_units == 0) | (lat_units == LAT_UNITS_MAX)] = 0

    return lat_units, lon_units


def encode_many(lats, lons) -> bytes:
    """Encode arrays of coordinates as concatenated 6-byte records.

    Args:
        lats: Latitudes in degrees; anything ``numpy.asarray`` accepts.
        lons: Longitudes in degrees, broadcast against ``lats``.

    Returns:
        ``6 * n`` bytes, record ``i`` being ``encode(lats[i], lons[i])``.
        Nothing is produced if any coordinate cannot be encoded.
    """
    lat_units, lon_units = quantize_many(lats, lons)
    lat_deg, lat_min, lat_sec, lat_16 = _split(lat_units)
    lon_deg, lon_min, lon_sec, lon_16 = _split(lon_units)

    dd = lat_deg + lon_deg * LAT_DEGREE_RADIX
    records = np.empty((dd.size, ENCODED_LENGTH), dtype=np.uint8)
    records[:, 0] = dd >> 8
    records[:, 1] = dd & 0xFF
    records[:, 2] = ((lat_min // 4) << 4) | (lon_min // 4)
    records[:, 3] = (
        ((lat_min % 4) << 6)
        | ((lon_min % 4) << 4)
        | ((lat_sec // 15) << 2)
        | (lon_sec // 15)
    )
    records[:, 4] = ((lat_sec % 15) << 4) | (lon_sec % 15)
    records[:, 5] = (lat_16 << 4) | lon_16

    logger.debug(f"Encoded {dd.size} coordinates")
    return records.tobytes()


def as_records(data, record_size: int = ENCODED_LENGTH) -> np.ndarray:
    """View concatenated records as an ``(n, 6)`` array, zero-padding short ones.

    Raises:
        ValueError: If ``record_size`` is not between 2 and 6, or the data is
            not a whole number of records.
    """
    if not MIN_ENCODED_LENGTH <= record_size <= ENCODED_LENGTH:
        raise ValueError(
            f"record_size must be between {MIN_ENCODED_LENGTH} and "
            f"{ENCODED_LENGTH}, got {record_size}"
        )
    raw = np.frombuffer(data, dtype=np.uint8)
    if raw.size % record_size:
        raise ValueError(
            f"Data length {raw.size} is not a multiple of record_size "
            f"{record_size}"
        )
    records = np.zeros((raw.size // record_size, ENCODED_LENGTH), dtype=np.uint8)
    records[:, :record_size] = raw.reshape(-1, record_size)
    return records


def unpack_many(records: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Unpack an ``(n, 6)`` record array into latitude and longitude arrays."""
    b = records.astype(np.int64)

    dd = (b[:, 0] << 8) | b[:, 1]
    lat = (dd % LAT_DEGREE_RADIX).astype(np.float64)
    lon = (dd // LAT_DEGREE_RADIX).astype(np.float64)

    lat_m = ((b[:, 2] >> 4) * 4).astype(np.float64)
    lon_m = ((b[:, 2] & 0xF) * 4).astype(np.float64)

    lat_m = lat_m + ((b[:, 3] >> 6) & 3)
    lon_m = lon_m + ((b[:, 3] >> 4) & 3)
    lat_s = (((b[:, 3] >> 2) & 3) * 15).astype(np.float64)
    lon_s = ((b[:, 3] & 3) * 15).astype(np.float64)

    lat_s = lat_s + ((b[:, 4] >> 4) & 0xF)
    lon_s = lon_s + (b[:, 4] & 0xF)

    lat_s = lat_s + (b[:, 5] >> 4) / 16.0
    lon_s = lon_s + (b[:, 5] & 0xF) / 16.0

    lat_m = lat_m + lat_s / 60.0
    lon_m = lon_m + lon_s / 60.0

    lat = lat + lat_m / 60.0
    lon = lon + lon_m / 60.0

    return lat - 90.0, lon


def decode_many(data, record_size: int = ENCODED_LENGTH) -> np.ndarray:
    """Decode concatenated records.

    Args:
        data: Bytes-like object holding ``n`` records of ``record_size`` bytes.
        record_size: Length of each record, 2 to 6. Shorter records are
            truncated encodings and decode to coarser cells.

    Returns:
        Array of shape ``(n, 2)`` with latitude and longitude columns.
    """
    lat, lon = unpack_many(as_records(data, record_size))
    logger.debug(f"Decoded {lat.size} records of {record_size} bytes")
    return np.column_stack((lat, lon))
