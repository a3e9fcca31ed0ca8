"""Site analysis application service.

Orchestrates one analysis request end to end: validate raw facility records,
generate ranked sites, and attach facility and site statistics. This is the
entry point an HTTP handler or CLI calls; it performs no I/O itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from domain.facilities.services import (
    CapacityStatistics,
    EmissionStatistics,
    capacity_statistics,
    emission_statistics,
    parse_acetic_facilities,
    parse_co2_facilities,
)
from domain.siting.analytics import site_statistics
from domain.siting.repositories import InfrastructureProvider
from domain.siting.services import generate_site_recommendations
from domain.siting.value_objects import OverlapSite, ScoringWeights, SiteStatistics
from src.config import EngineSettings
from src.infrastructure.siting import SyntheticInfrastructureProvider

logger = logging.getLogger(__name__)


class AnalysisParameters(BaseModel):
    max_distance_km: float
    min_score: float
    weights: ScoringWeights
    random_seed: int | None
    acetic_facilities_count: int
    co2_facilities_count: int

    model_config = ConfigDict(frozen=True)


class AnalysisReport(BaseModel):
    """Ranked sites plus the statistics and parameters that produced them."""

    sites: tuple[OverlapSite, ...]
    acetic_statistics: CapacityStatistics | None
    co2_statistics: EmissionStatistics | None
    site_statistics: SiteStatistics | None
    parameters: AnalysisParameters

    model_config = ConfigDict(frozen=True)

    @property
    def count(self) -> int:
        return len(self.sites)


def analyze_sites(
    acetic_records: Iterable[Mapping[str, Any]],
    co2_records: Iterable[Mapping[str, Any]],
    settings: EngineSettings | None = None,
    provider: InfrastructureProvider | None = None,
) -> AnalysisReport:
    """Run a full site analysis over raw facility records.

    Invalid records are dropped (and logged) before generation. When no
    provider is given, a fresh SyntheticInfrastructureProvider seeded from
    ``settings.random_seed`` is created for this call only.

    Raises:
        ConfigurationError: If the configured weights do not sum to 1.0
        InvalidInputError: If a threshold is out of range
    """
    if settings is None:
        settings = EngineSettings()
    weights = settings.scoring_weights()

    acetic = parse_acetic_facilities(acetic_records)
    co2 = parse_co2_facilities(co2_records)

    if provider is None:
        provider = SyntheticInfrastructureProvider(seed=settings.random_seed)

    logger.info(
        "Analyzing %d acetic acid x %d CO2 facilities (max %.1f km, min score %s)",
        len(acetic),
        len(co2),
        settings.max_distance_km,
        settings.min_score,
    )
    sites = generate_site_recommendations(
        acetic,
        co2,
        provider,
        max_distance_km=settings.max_distance_km,
        min_score=settings.min_score,
        weights=weights,
    )
    logger.info("Generated %d candidate sites", len(sites))

    return AnalysisReport(
        sites=tuple(sites),
        acetic_statistics=capacity_statistics(acetic),
        co2_statistics=emission_statistics(co2),
        site_statistics=site_statistics(sites),
        parameters=AnalysisParameters(
            max_distance_km=settings.max_distance_km,
            min_score=settings.min_score,
            weights=weights,
            random_seed=settings.random_seed,
            acetic_facilities_count=len(acetic),
            co2_facilities_count=len(co2),
        ),
    )
