"""Siting Bounded Context - Geodesy.

Great-circle distance on a spherical Earth. Pure functions, no I/O.
"""

from __future__ import annotations

import math

from domain.siting.errors import InvalidInputError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EARTH_RADIUS_KM = 6371.0  # Mean Earth radius used by the haversine formula


def validate_coordinate(latitude: float, longitude: float) -> None:
    """Raise InvalidInputError unless latitude/longitude are finite and in range."""
    if not (math.isfinite(latitude) and -90 <= latitude <= 90):
        raise InvalidInputError("latitude", latitude, "must be within [-90, 90]")
    if not (math.isfinite(longitude) and -180 <= longitude <= 180):
        raise InvalidInputError("longitude", longitude, "must be within [-180, 180]")


def haversine_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Calculate great-circle distance between two coordinates in kilometers.

    Uses the haversine formula with a mean Earth radius of 6371 km.
    Symmetric, zero for identical points, non-negative.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometers

    Raises:
        InvalidInputError: If any coordinate is out of range or not finite
    """
    validate_coordinate(lat1, lon1)
    validate_coordinate(lat2, lon2)

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
