"""Truncated encodings for use as sortable index keys.

A key of ``k`` bytes is the first ``k`` bytes of the full encoding and names a
cell of the latitude/longitude grid. Shorter keys name larger cells; all keys
of the same length sort by combined degree first.
"""

from typing import Annotated

from pydantic import Field, validate_call

from geoencode.codec.encoder import encode
from geoencode.settings.geoencode_settings import GeoEncodeSettings
from geoencode.types.geo import ENCODED_LENGTH, MIN_ENCODED_LENGTH

KeyLength = Annotated[int, Field(ge=MIN_ENCODED_LENGTH, le=ENCODED_LENGTH)]

# Edge of the cell identified by a key of each length, in degrees
_CELL_SIZES = {
    2: 1.0,
    3: 4 / 60,
    4: 15 / 3600,
    5: 1 / 3600,
    6: 1 / (3600 * 16),
}


@validate_call(config=dict(arbitrary_types_allowed=True))
def encode_key(
    lat: float,
    lon: float,
    key_length: KeyLength | None = None,
    settings: GeoEncodeSettings | None = None,
) -> bytes:
    """Encode a coordinate and keep only the first ``key_length`` bytes.

    Args:
        lat: Latitude in degrees, from -90 to 90.
        lon: Longitude in degrees; wrapped to [0, 360).
        key_length: Number of bytes to keep, 2 to 6. Defaults to the
            ``key_length`` setting.
        settings: Settings to read the default key length from. If None, they
            are loaded from the environment.

    Returns:
        The truncated encoding.
    """
    if settings is None:
        settings = GeoEncodeSettings()
    return encode(lat, lon)[: settings.resolve_key_length(key_length)]


@validate_call
def truncate_key(encoded: bytes, key_length: KeyLength) -> bytes:
    return encoded[:key_length]


@validate_call
def cell_size(key_length: KeyLength) -> float:
    """Angular size, in degrees, of the cell a key of ``key_length`` bytes names."""
    return _CELL_SIZES[key_length]
