from geoencode.codec import (
    BoundingBoxDecoder,
    decode,
    decode_many,
    encode,
    encode_coord,
    encode_into,
    encode_many,
)
from geoencode.errors import (
    GeoEncodeError,
    LatitudeOutOfRangeError,
    LongitudeNotFiniteError,
)
from geoencode.keys import cell_size, encode_key, truncate_key
from geoencode.settings import GeoEncodeSettings
from geoencode.types.geo import LatLongCoord

__all__ = [
    "BoundingBoxDecoder",
    "GeoEncodeError",
    "GeoEncodeSettings",
    "LatLongCoord",
    "LatitudeOutOfRangeError",
    "LongitudeNotFiniteError",
    "cell_size",
    "decode",
    "decode_many",
    "encode",
    "encode_coord",
    "encode_into",
    "encode_key",
    "encode_many",
    "truncate_key",
]
