from geoencode.errors.geoencode_error import GeoEncodeError


class LatitudeOutOfRangeError(GeoEncodeError, ValueError):
    def __init__(self, lat: float):
        super().__init__(
            f"Latitude {lat} is out of range",
            details="Latitude must be between -90 and 90 degrees (inclusive).",
        )
        self.lat = lat


class LongitudeNotFiniteError(GeoEncodeError, ValueError):
    def __init__(self, lon: float):
        super().__init__(
            f"Longitude {lon} is not a finite number",
            details="Any finite longitude is accepted and wrapped to [0, 360).",
        )
        self.lon = lon
