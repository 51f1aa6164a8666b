import numpy as np
import pytest

from geoencode import (
    BoundingBoxDecoder,
    LatitudeOutOfRangeError,
    LongitudeNotFiniteError,
    decode,
    decode_many,
    encode,
    encode_many,
)
from tests.codec.utils import random_grid_coordinates


@pytest.fixture
def coordinates():
    rng = np.random.default_rng(7)
    lats, lons, _, _ = random_grid_coordinates(rng, 2000)
    # Poles, the seam and the zero-byte case
    lats = np.concatenate([lats, [-90, 90, -89.9999999, 0, 0, 10]])
    lons = np.concatenate([lons, [1, 1, 359.9999999, 359.9999999, -359.9999999, 96]])
    return lats, lons


def test_encode_many_matches_scalar(coordinates):
    lats, lons = coordinates
    expected = b"".join(encode(float(a), float(b)) for a, b in zip(lats, lons))
    assert encode_many(lats, lons) == expected


def test_encode_many_broadcasts():
    assert encode_many([10, 20], 96) == encode(10, 96) + encode(20, 96)


def test_encode_many_empty():
    assert encode_many([], []) == b""


@pytest.mark.parametrize("bad", [91, -91, np.nan])
def test_encode_many_rejects_latitude(bad):
    with pytest.raises(LatitudeOutOfRangeError) as exc_info:
        encode_many([0, bad, 95], [0, 0, 0])
    assert exc_info.value.lat == bad or np.isnan(bad)


def test_encode_many_rejects_non_finite_longitude():
    with pytest.raises(LongitudeNotFiniteError):
        encode_many([0, 0], [0, np.inf])


@pytest.mark.parametrize("record_size", [2, 3, 4, 5, 6])
def test_decode_many_matches_scalar(coordinates, record_size):
    lats, lons = coordinates
    records = [encode(float(a), float(b))[:record_size] for a, b in zip(lats, lons)]
    decoded = decode_many(b"".join(records), record_size=record_size)
    assert decoded.shape == (len(records), 2)
    for row, record in zip(decoded, records):
        expected = decode(record)
        assert row[0] == expected.lat
        assert row[1] == expected.lon


@pytest.mark.parametrize("record_size", [1, 7])
def test_decode_many_rejects_record_size(record_size):
    with pytest.raises(ValueError):
        decode_many(bytes(14), record_size=record_size)


def test_decode_many_rejects_partial_record():
    with pytest.raises(ValueError):
        decode_many(bytes(13))


@pytest.mark.parametrize(
    "box",
    [
        (-90, -60, 10, 50),
        (-10, -60, 90, 50),
        (-10, 0, 10, 50),
        (-45.5, 170.25, 60.75, -170.5),
        (-95, 10, 0, 20),
    ],
)
@pytest.mark.parametrize("record_size", [2, 4, 6])
def test_bounding_box_many_matches_scalar(coordinates, box, record_size):
    lats, lons = coordinates
    bb = BoundingBoxDecoder(*box)
    records = [encode(float(a), float(b))[:record_size] for a, b in zip(lats, lons)]
    data = b"".join(records)

    mask = bb.contains_many(data, record_size=record_size)
    assert mask.tolist() == [bb.contains(record) for record in records]

    accepted = bb.decode_many(data, record_size=record_size)
    expected = [bb.decode(record) for record in records]
    expected = [(c.lat, c.lon) for c in expected if c is not None]
    assert accepted.shape == (len(expected), 2)
    assert [tuple(row) for row in accepted.tolist()] == expected


def test_bounding_box_decode_many_is_masked_decode(coordinates):
    lats, lons = coordinates
    data = encode_many(lats, lons)
    bb = BoundingBoxDecoder(-45.5, 170.25, 60.75, -170.5)
    mask = bb.contains_many(data)
    assert mask.any()
    np.testing.assert_array_equal(bb.decode_many(data), decode_many(data)[mask])
