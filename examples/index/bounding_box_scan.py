import numpy as np

from geoencode import BoundingBoxDecoder, decode, encode_key, encode_many
from geoencode.logging import get_logger

# Run with GEOENCODE_LOG_LEVEL=INFO to see progress, DEBUG for codec details
logger = get_logger(__name__)

CITIES = {
    "London": (51.5074, -0.1278),
    "Reykjavik": (64.1466, -21.9426),
    "Cape Town": (-33.9249, 18.4241),
    "Auckland": (-36.8485, 174.7633),
    "Anchorage": (61.2181, -149.9003),
    "Amundsen-Scott": (-90.0, 139.2667),
}


def main():
    # Keys of 3 bytes identify 4 arcminute cells and sort by degree
    for name, (lat, lon) in sorted(CITIES.items(), key=lambda c: encode_key(*c[1], 3)):
        key = encode_key(lat, lon, key_length=3)
        print(f"{key.hex()}  {name}")

    lats, lons = np.array(list(CITIES.values())).T
    records = encode_many(lats, lons)
    logger.info(f"Encoded {len(CITIES)} cities into {len(records)} bytes")

    # A box crossing the 0/360 meridian and reaching the south pole
    box = BoundingBoxDecoder(-90, -30, 70, 30)
    for i, (name, inside) in enumerate(zip(CITIES, box.contains_many(records))):
        if inside:
            print(f"{name} is inside: {decode(records[i * 6 : (i + 1) * 6])}")


if __name__ == "__main__":
    main()
