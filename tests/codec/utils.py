"""Helpers for codec tests."""

import math

import numpy as np

from geoencode.types.geo import LAT_UNITS_MAX, LON_UNITS_FULL_TURN, UNITS_PER_DEGREE


def wrap360(lon: float) -> float:
    lon = math.fmod(lon, 360.0)
    return lon + 360.0 if lon < 0 else lon


def random_grid_coordinates(
    rng: np.random.Generator, n: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Random coordinates near the quantization grid, with their grid values.

    Each coordinate is a grid point plus a jitter of less than half a unit, so
    its expected decoded value is the grid point itself.

    Returns:
        (lats, lons, expected_lats, expected_lons)
    """
    lat_units = rng.integers(0, LAT_UNITS_MAX + 1, size=n)
    lon_units = rng.integers(-5 * LON_UNITS_FULL_TURN, 5 * LON_UNITS_FULL_TURN, size=n)

    lats = (lat_units + rng.uniform(-0.4, 0.4, size=n)) / UNITS_PER_DEGREE - 90.0
    lats = np.clip(lats, -90.0, 90.0)
    lons = (lon_units + rng.uniform(-0.4, 0.4, size=n)) / UNITS_PER_DEGREE

    expected_lats = lat_units / UNITS_PER_DEGREE - 90.0
    expected_lons = (lon_units % LON_UNITS_FULL_TURN) / UNITS_PER_DEGREE
    at_pole = (lat_units == 0) | (lat_units == LAT_UNITS_MAX)
    expected_lons[at_pole] = 0.0

    return lats, lons, expected_lats, expected_lons


def in_box(
    lat: float, lon: float, lat1: float, lon1: float, lat2: float, lon2: float
) -> bool:
    """Direct range check of a decoded coordinate against a box."""
    lon1 = wrap360(lon1)
    lon2 = wrap360(lon2)
    if lat < lat1 or lat > lat2:
        return False
    if lat == -90.0 or lat == 90.0:
        return True
    if lon1 <= lon2:
        return lon1 <= lon <= lon2
    return lon >= lon1 or lon <= lon2
