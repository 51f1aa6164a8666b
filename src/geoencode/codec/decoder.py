from geoencode.types.geo import ENCODED_LENGTH, LAT_DEGREE_RADIX, LatLongCoord

_PADDING = bytes(ENCODED_LENGTH)


def unpack(buffer: bytes | bytearray | memoryview) -> tuple[float, float]:
    """Unpack an encoded buffer into ``(lat, lon)`` floats.

    Absent trailing fields are zero, which adds nothing to the result, so a
    truncated buffer decodes to the south-west corner of its coarser cell.
    """
    b = (bytes(buffer[:ENCODED_LENGTH]) + _PADDING)[:ENCODED_LENGTH]

    # Read from the caller's buffer so that fewer than 2 bytes raises IndexError
    dd = buffer[0] << 8 | buffer[1]
    lat = float(dd % LAT_DEGREE_RADIX)
    lon = float(dd // LAT_DEGREE_RADIX)

    lat_m = float((b[2] >> 4) * 4)
    lon_m = float((b[2] & 0xF) * 4)

    lat_m += (b[3] >> 6) & 3
    lon_m += (b[3] >> 4) & 3
    lat_s = float(((b[3] >> 2) & 3) * 15)
    lon_s = float((b[3] & 3) * 15)

    lat_s += (b[4] >> 4) & 0xF
    lon_s += b[4] & 0xF

    lat_s += (b[5] >> 4) / 16.0
    lon_s += (b[5] & 0xF) / 16.0

    lat_m += lat_s / 60.0
    lon_m += lon_s / 60.0

    lat += lat_m / 60.0
    lon += lon_m / 60.0

    return lat - 90.0, lon


def decode(buffer: bytes | bytearray | memoryview) -> LatLongCoord:
    """Decode a coordinate from an encoded buffer.

    Args:
        buffer: At least 2 bytes produced by ``encode`` (or a prefix of such an
            encoding). Bytes after the sixth are ignored.

    Returns:
        The decoded coordinate, with longitude in the range 0 <= lon < 360.

    Decoding never fails. No validation is done on the degree fields, so a
    malformed buffer may decode to a latitude outside [-90, 90] or a longitude
    of 360 or more.
    """
    lat, lon = unpack(buffer)
    return LatLongCoord(lat=lat, lon=lon)
