import numpy as np
from pydantic import FiniteFloat, validate_call

from geoencode.codec._angles import (
    is_pole,
    quantize_latitude,
    round_half_away,
    wrap_longitude,
)
from geoencode.codec.batch import as_records, unpack_many
from geoencode.codec.decoder import unpack
from geoencode.logging import get_logger
from geoencode.types.geo import (
    ENCODED_LENGTH,
    LAT_DEGREE_RADIX,
    LAT_UNITS_MAX,
    UNITS_PER_DEGREE,
    LatLongCoord,
)

logger = get_logger(__name__)


def _start_byte(lat: float, wrapped_lon: float) -> tuple[int, bool]:
    """First encoded byte of a box corner, and whether the corner is a pole."""
    lat_units = min(max(quantize_latitude(lat), 0), LAT_UNITS_MAX)
    # No fold of a full turn to 0: an east edge just below 360 must stay the
    # highest start byte. dd is at most 180 + 360 * 181, so dd >> 8 fits a byte.
    lon_units = round_half_away(wrapped_lon * UNITS_PER_DEGREE)
    dd = (
        lat_units // UNITS_PER_DEGREE
        + (lon_units // UNITS_PER_DEGREE) * LAT_DEGREE_RADIX
    )
    return dd >> 8, is_pole(lat_units)


class BoundingBoxDecoder:
    """Decoder that only returns coordinates inside a bounding box.

    The first byte of an encoding increases with the combined latitude and
    longitude degree, so most points outside the box are rejected by comparing
    that byte with the start bytes of the box corners, without a full decode.

    The box runs from ``lat1`` to ``lat2`` (``lat1 <= lat2`` is assumed, not
    checked) and eastward from ``lon1`` to ``lon2``. If the wrapped ``lon1`` is
    greater than the wrapped ``lon2`` the box crosses the 0/360 meridian.

    Instances are immutable and may be shared between threads.
    """

    @validate_call
    def __init__(
        self, lat1: FiniteFloat, lon1: FiniteFloat, lat2: FiniteFloat, lon2: FiniteFloat
    ):
        self._lon1 = wrap_longitude(lon1)
        self._lon2 = wrap_longitude(lon2)
        self._min_lat = lat1
        self._max_lat = lat2

        self._start1, pole1 = _start_byte(lat1, self._lon1)
        self._start2, pole2 = _start_byte(lat2, self._lon2)
        self._include_poles = pole1 or pole2
        self._discontinuous = self._lon1 > self._lon2

        logger.debug(
            f"Bounding box lat [{lat1}, {lat2}] lon [{self._lon1}, {self._lon2}]: "
            f"start bytes {self._start1}..{self._start2}, "
            f"include_poles={self._include_poles}, "
            f"discontinuous={self._discontinuous}"
        )

    @property
    def lon1(self) -> float:
        return self._lon1

    @property
    def lon2(self) -> float:
        return self._lon2

    @property
    def min_lat(self) -> float:
        return self._min_lat

    @property
    def max_lat(self) -> float:
        return self._max_lat

    @property
    def start1(self) -> int:
        return self._start1

    @property
    def start2(self) -> int:
        return self._start2

    @property
    def include_poles(self) -> bool:
        return self._include_poles

    @property
    def discontinuous(self) -> bool:
        return self._discontinuous

    def _start_rejected(self, start: int) -> bool:
        if self._include_poles and start == 0:
            return False
        if self._discontinuous:
            # start2 < start1 here; the gap between them is outside the box
            return self._start2 < start < self._start1
        return start < self._start1 or start > self._start2

    def _lon_rejected(self, lon: float) -> bool:
        if self._discontinuous:
            return self._lon2 < lon < self._lon1
        return lon < self._lon1 or lon > self._lon2

    def decode(self, buffer: bytes | bytearray | memoryview) -> LatLongCoord | None:
        """Decode ``buffer`` if it lies inside the box.

        Args:
            buffer: An encoding of at least 2 bytes, as accepted by ``decode``.

        Returns:
            The decoded coordinate, or None if it is outside the box.
        """
        if self._start_rejected(buffer[0]):
            return None

        lat, lon = unpack(buffer)
        if lat < self._min_lat or lat > self._max_lat:
            return None
        # At a pole the longitude is always 0 and carries no meaning
        if lat == -90.0 or lat == 90.0:
            return LatLongCoord(lat=lat, lon=lon)
        if self._lon_rejected(lon):
            return None
        return LatLongCoord(lat=lat, lon=lon)

    def contains(self, buffer: bytes | bytearray | memoryview) -> bool:
        return self.decode(buffer) is not None

    def _classify(
        self, data, record_size: int
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Acceptance mask, latitudes and longitudes of concatenated records."""
        records = as_records(data, record_size)
        start = records[:, 0].astype(np.int64)

        if self._discontinuous:
            rejected = (self._start2 < start) & (start < self._start1)
        else:
            rejected = (start < self._start1) | (start > self._start2)
        if self._include_poles:
            rejected &= start != 0

        lat, lon = unpack_many(records)
        inside = ~rejected & (lat >= self._min_lat) & (lat <= self._max_lat)
        if self._discontinuous:
            lon_ok = ~((self._lon2 < lon) & (lon < self._lon1))
        else:
            lon_ok = (lon >= self._lon1) & (lon <= self._lon2)
        inside &= (lat == -90.0) | (lat == 90.0) | lon_ok

        logger.debug(f"{int(inside.sum())} of {inside.size} records inside box")
        return inside, lat, lon

    def contains_many(self, data, record_size: int = ENCODED_LENGTH) -> np.ndarray:
        """Test concatenated records against the box.

        Args:
            data: Bytes-like object holding records of ``record_size`` bytes.
            record_size: Length of each record, 2 to 6.

        Returns:
            Boolean array, True where ``decode`` would accept the record.
        """
        inside, _, _ = self._classify(data, record_size)
        return inside

    def decode_many(self, data, record_size: int = ENCODED_LENGTH) -> np.ndarray:
        """Decode the records that lie inside the box.

        Returns:
            Array of shape ``(m, 2)`` with latitude and longitude columns, one
            row per accepted record, in input order.
        """
        inside, lat, lon = self._classify(data, record_size)
        return np.column_stack((lat[inside], lon[inside]))

    def __repr__(self):
        return (
            f"BoundingBoxDecoder(lat1={self._min_lat}, lon1={self._lon1}, "
            f"lat2={self._max_lat}, lon2={self._lon2})"
        )
