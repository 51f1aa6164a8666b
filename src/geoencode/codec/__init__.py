from geoencode.codec._angles import split_angle
from geoencode.codec.batch import decode_many, encode_many
from geoencode.codec.bounding_box import BoundingBoxDecoder
from geoencode.codec.decoder import decode
from geoencode.codec.encoder import encode, encode_coord, encode_into

__all__ = [
    "BoundingBoxDecoder",
    "decode",
    "decode_many",
    "encode",
    "encode_coord",
    "encode_into",
    "encode_many",
    "split_angle",
]
