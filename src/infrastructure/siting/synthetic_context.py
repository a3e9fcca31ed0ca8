"""Synthetic infrastructure adapter for InfrastructureProvider.

Stands in for real GIS lookups (ports, highways, rail, pipelines, power grid,
census density, zoning) by drawing each flag from a seeded numpy Generator.
Coastal coordinates are the only ones that can be near a port.

Each call consumes exactly DRAWS_PER_PROFILE uniforms regardless of which
branches are taken, so a given seed always yields the same sequence of
profiles for the same sequence of calls.
"""

from __future__ import annotations

import logging

import numpy as np

from domain.siting.value_objects import InfrastructureProfile, PopulationDensity

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

DRAWS_PER_PROFILE = 8

# Probability thresholds: flag is set when the uniform draw exceeds the value
URBAN_THRESHOLD = 0.6
PORT_THRESHOLD = 0.4
HIGHWAY_THRESHOLD = 0.3
RAIL_THRESHOLD = 0.5
PIPELINE_THRESHOLD = 0.4
POWER_GRID_THRESHOLD = 0.2
MEDIUM_DENSITY_THRESHOLD = 0.5
ZONING_THRESHOLD = 0.4

# Coarse coastline heuristic for the continental US
COASTAL_MIN_ABS_LONGITUDE = 80.0
COASTAL_SOUTH_OF_LATITUDE = 35.0
COASTAL_NORTH_OF_LATITUDE = 45.0


def is_coastal(latitude: float, longitude: float) -> bool:
    return abs(longitude) > COASTAL_MIN_ABS_LONGITUDE and (
        latitude < COASTAL_SOUTH_OF_LATITUDE or latitude > COASTAL_NORTH_OF_LATITUDE
    )


class SyntheticInfrastructureProvider:
    """Seedable random InfrastructureProvider.

    Parameters
    ----------
    seed: int | None
        Seed for a fresh numpy Generator. None draws OS entropy, which makes
        runs non-reproducible.
    rng: numpy.random.Generator | None
        Existing generator to draw from; takes precedence over ``seed``.

    One instance holds mutable generator state, so create one per generation
    run rather than sharing it across concurrent runs.
    """

    def __init__(
        self, seed: int | None = None, rng: np.random.Generator | None = None
    ) -> None:
        self.seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def profile_at(self, latitude: float, longitude: float) -> InfrastructureProfile:
        (
            urban,
            port,
            highway,
            rail,
            pipeline,
            power_grid,
            density,
            zoning,
        ) = self._rng.random(DRAWS_PER_PROFILE)

        if urban > URBAN_THRESHOLD:
            population_density = PopulationDensity.HIGH
        elif density > MEDIUM_DENSITY_THRESHOLD:
            population_density = PopulationDensity.MEDIUM
        else:
            population_density = PopulationDensity.LOW

        profile = InfrastructureProfile(
            near_port=bool(is_coastal(latitude, longitude) and port > PORT_THRESHOLD),
            near_highway=bool(highway > HIGHWAY_THRESHOLD),
            near_rail=bool(rail > RAIL_THRESHOLD),
            near_pipeline=bool(pipeline > PIPELINE_THRESHOLD),
            near_power_grid=bool(power_grid > POWER_GRID_THRESHOLD),
            population_density=population_density,
            industrial_zoning=bool(zoning > ZONING_THRESHOLD),
        )
        logger.debug(
            "Synthetic profile at (%.4f, %.4f): %s", latitude, longitude, profile
        )
        return profile


class FixedInfrastructureProvider:
    """InfrastructureProvider that returns the same profile everywhere.

    Useful for what-if analysis ("assume every site has rail and zoning")
    and for deterministic scoring.
    """

    def __init__(self, profile: InfrastructureProfile) -> None:
        self.profile = profile

    def profile_at(self, latitude: float, longitude: float) -> InfrastructureProfile:
        return self.profile
