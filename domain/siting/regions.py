"""Siting Bounded Context - Regional Classifier.

Maps a coordinate to one of five coarse regulatory zones and combines it with
an infrastructure profile into a GeographicContext.

The zone boxes are a deliberately coarse stand-in for real regulatory data:
every coordinate resolves to a zone, with SOUTHEAST as the catch-all.
"""

from __future__ import annotations

from typing import NamedTuple

from domain.siting.geodesy import validate_coordinate
from domain.siting.repositories import InfrastructureProvider
from domain.siting.value_objects import BoundingBox, GeographicContext, Zone


class ZoneRating(NamedTuple):
    """Base ratings a zone contributes to the scoring model."""

    governmental: float
    logistics: float
    policy: float


# ---------------------------------------------------------------------------
# Static Zone Tables
# ---------------------------------------------------------------------------
ZONE_RATINGS: dict[Zone, ZoneRating] = {
    Zone.GULF_COAST: ZoneRating(governmental=85, logistics=90, policy=75),
    Zone.MIDWEST: ZoneRating(governmental=70, logistics=85, policy=60),
    Zone.NORTHEAST: ZoneRating(governmental=60, logistics=70, policy=80),
    Zone.WEST_COAST: ZoneRating(governmental=65, logistics=75, policy=90),
    Zone.SOUTHEAST: ZoneRating(governmental=80, logistics=80, policy=70),
}

# Evaluated in order; first match wins. Boxes overlap (e.g. midwest/northeast
# share lon -80), so the order is part of the contract.
ZONE_BOUNDS: tuple[tuple[Zone, BoundingBox], ...] = (
    # Texas, Louisiana, Mississippi, Alabama
    (Zone.GULF_COAST, BoundingBox(min_x=-97, min_y=25, max_x=-87, max_y=32)),
    # Illinois, Indiana, Ohio, Michigan, Wisconsin
    (Zone.MIDWEST, BoundingBox(min_x=-90, min_y=38, max_x=-80, max_y=47)),
    # New York, Pennsylvania, New Jersey, Connecticut, Massachusetts
    (Zone.NORTHEAST, BoundingBox(min_x=-80, min_y=39, max_x=-69, max_y=45)),
    # California, Oregon, Washington
    (Zone.WEST_COAST, BoundingBox(min_x=-125, min_y=32, max_x=-114, max_y=49)),
)

FALLBACK_ZONE = Zone.SOUTHEAST


def classify_region(latitude: float, longitude: float) -> Zone:
    """Return the zone containing the coordinate (inclusive box edges).

    Raises:
        InvalidInputError: If the coordinate is out of range
    """
    validate_coordinate(latitude, longitude)
    for zone, bounds in ZONE_BOUNDS:
        if bounds.contains(latitude, longitude):
            return zone
    return FALLBACK_ZONE


def zone_rating(zone: Zone) -> ZoneRating:
    return ZONE_RATINGS[zone]


def derive_context(
    latitude: float, longitude: float, provider: InfrastructureProvider
) -> GeographicContext:
    """Build the GeographicContext for a coordinate.

    No caching: the provider is queried on every call, so a stochastic
    provider may return different profiles for the same coordinate.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        provider: Source of infrastructure proximity and demographics

    Returns:
        GeographicContext combining zone and provider profile
    """
    region = classify_region(latitude, longitude)
    profile = provider.profile_at(latitude, longitude)
    return GeographicContext.from_profile(region, profile)
