"""Geographic coordinates and great-circle distance."""

import math
from dataclasses import dataclass

EARTH_RADIUS = 6371000  # meters
DEG_TO_RAD = 3.1415926535 / 180.0


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in degrees."""

    lat: float
    lng: float


def compute_distance(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance in meters using the spherical law of cosines."""
    if a.lat == b.lat and a.lng == b.lng:
        return 0.0

    if math.isinf(a.lat) or math.isinf(a.lng) or math.isinf(b.lat) or math.isinf(b.lng):
        return math.nan

    lat1 = a.lat * DEG_TO_RAD
    lat2 = b.lat * DEG_TO_RAD
    delta_lng = abs(a.lng - b.lng) * DEG_TO_RAD

    cos_angle = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(
        delta_lng
    )
    # Clamp into the acos domain; NaN falls through untouched
    if cos_angle > 1.0:
        cos_angle = 1.0
    elif cos_angle < -1.0:
        cos_angle = -1.0

    return math.acos(cos_angle) * EARTH_RADIUS
