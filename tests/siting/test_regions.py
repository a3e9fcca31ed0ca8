"""Tests for the regional classifier."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from domain.siting.errors import InvalidInputError
from domain.siting.regions import (
    ZONE_BOUNDS,
    ZONE_RATINGS,
    classify_region,
    derive_context,
    zone_rating,
)
from domain.siting.value_objects import GeographicContext, PopulationDensity, Zone
from tests.factories import bare_profile, full_profile


@pytest.mark.parametrize(
    "lat, lon, zone",
    [
        (29.7604, -95.3698, Zone.GULF_COAST),  # Houston
        (30.6954, -88.0399, Zone.GULF_COAST),  # Mobile
        (41.8781, -87.6298, Zone.MIDWEST),  # Chicago
        (39.9612, -82.9988, Zone.MIDWEST),  # Columbus
        (40.7128, -74.0060, Zone.NORTHEAST),  # New York
        (42.3601, -71.0589, Zone.NORTHEAST),  # Boston
        (34.0522, -118.2437, Zone.WEST_COAST),  # Los Angeles
        (47.6062, -122.3321, Zone.WEST_COAST),  # Seattle
        (33.7490, -84.3880, Zone.SOUTHEAST),  # Atlanta
        (51.5074, -0.1278, Zone.SOUTHEAST),  # London falls through
        (-33.8688, 151.2093, Zone.SOUTHEAST),  # Sydney falls through
    ],
)
def test_classify_region(lat, lon, zone):
    assert classify_region(lat, lon) is zone


def test_classify_region_edges_are_inclusive():
    assert classify_region(25.0, -97.0) is Zone.GULF_COAST
    assert classify_region(32.0, -87.0) is Zone.GULF_COAST


def test_classify_region_priority_order():
    """(40, -80) is inside both midwest and northeast boxes; midwest wins."""
    assert classify_region(40.0, -80.0) is Zone.MIDWEST
    assert [zone for zone, _ in ZONE_BOUNDS] == [
        Zone.GULF_COAST,
        Zone.MIDWEST,
        Zone.NORTHEAST,
        Zone.WEST_COAST,
    ]


def test_classify_region_rejects_invalid_coordinate():
    with pytest.raises(InvalidInputError):
        classify_region(120.0, 0.0)


def test_zone_ratings_table_is_closed():
    assert set(ZONE_RATINGS) == set(Zone)
    assert len(ZONE_RATINGS) == 5
    assert zone_rating(Zone.GULF_COAST) == (85, 90, 75)
    assert zone_rating(Zone.WEST_COAST).policy == 90


def test_derive_context_combines_zone_and_profile():
    provider = MagicMock()
    provider.profile_at.return_value = full_profile(
        population_density=PopulationDensity.HIGH
    )

    context = derive_context(41.8781, -87.6298, provider)

    assert isinstance(context, GeographicContext)
    assert context.region is Zone.MIDWEST
    assert context.near_rail is True
    assert context.population_density is PopulationDensity.HIGH
    provider.profile_at.assert_called_once_with(41.8781, -87.6298)


def test_derive_context_queries_provider_every_call():
    provider = MagicMock()
    provider.profile_at.return_value = bare_profile()

    derive_context(29.76, -95.37, provider)
    derive_context(29.76, -95.37, provider)

    assert provider.profile_at.call_count == 2


def test_geographic_context_is_frozen():
    context = GeographicContext.from_profile(Zone.SOUTHEAST, bare_profile())
    with pytest.raises(Exception):
        context.near_port = True  # type: ignore[misc]
