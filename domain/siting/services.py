"""Siting Bounded Context - Domain Services.

Site generation: pairs every acetic acid facility with every CO2 emitter,
keeps pairs within the distance threshold, scores a capacity-weighted
midpoint and ranks the resulting candidate sites.

Pure and reentrant: all state (including the site-id counter) is local to a
single call. The only source of variation is the injected
InfrastructureProvider, which a caller seeds for reproducible runs.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from domain.facilities.value_objects import AceticAcidFacility, CO2EmitterFacility
from domain.siting.errors import ComputationError, InvalidInputError
from domain.siting.geodesy import haversine_distance_km
from domain.siting.regions import derive_context
from domain.siting.repositories import InfrastructureProvider
from domain.siting.scoring import overall_score, round_half_up, score_context
from domain.siting.synergy import apply_synergy_boost, synergy_bonus
from domain.siting.value_objects import OverlapSite, ScoringFactors, ScoringWeights

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_MAX_DISTANCE_KM = 50.0
DEFAULT_MIN_SCORE = 0
CAPACITY_WEIGHT_SCALE = 1_000_000  # tons/year of acetic capacity per unit weight
EMISSION_WEIGHT_SCALE = 10_000_000  # tons/year of CO2 per unit weight
SITE_ID_PREFIX = "site-"


# ---------------------------------------------------------------------------
# Weighted Midpoint
# ---------------------------------------------------------------------------
def weighted_midpoint(
    acetic: AceticAcidFacility, co2: CO2EmitterFacility
) -> tuple[float, float]:
    """Capacity/emission-weighted average of the two facility coordinates.

    The larger producer or emitter pulls the proposed site toward itself.
    Averaging is done on raw lat/lon, which is adequate for pairs within the
    generator's distance threshold.

    Returns:
        (latitude, longitude) of the candidate site

    Raises:
        ComputationError: If the combined weight is not positive, or the
            result is not finite
    """
    acetic_weight = acetic.capacity / CAPACITY_WEIGHT_SCALE
    co2_weight = co2.co2_emission_rate / EMISSION_WEIGHT_SCALE
    total_weight = acetic_weight + co2_weight

    if not (math.isfinite(total_weight) and total_weight > 0):
        raise ComputationError(
            f"Non-positive combined weight for pair ({acetic.id}, {co2.id}): "
            f"{total_weight}"
        )

    latitude = (
        acetic.latitude * acetic_weight + co2.latitude * co2_weight
    ) / total_weight
    longitude = (
        acetic.longitude * acetic_weight + co2.longitude * co2_weight
    ) / total_weight

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ComputationError(
            f"Midpoint for pair ({acetic.id}, {co2.id}) is not finite"
        )
    return latitude, longitude


# ---------------------------------------------------------------------------
# Main Service: generate_site_recommendations
# ---------------------------------------------------------------------------
def _score_pair(
    acetic: AceticAcidFacility,
    co2: CO2EmitterFacility,
    provider: InfrastructureProvider,
) -> tuple[float, float, ScoringFactors]:
    latitude, longitude = weighted_midpoint(acetic, co2)
    context = derive_context(latitude, longitude, provider)
    # Boost is applied to clamped base scores, then clamped again
    factors = apply_synergy_boost(score_context(context), synergy_bonus([acetic], [co2]))
    return latitude, longitude, factors


def generate_site_recommendations(
    acetic_facilities: Sequence[AceticAcidFacility],
    co2_facilities: Sequence[CO2EmitterFacility],
    provider: InfrastructureProvider,
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
    min_score: float = DEFAULT_MIN_SCORE,
    weights: ScoringWeights | None = None,
) -> list[OverlapSite]:
    """Generate ranked candidate co-location sites.

    Enumerates the full cross product (outer loop acetic, inner loop CO2).
    For each pair within max_distance_km, scores the weighted midpoint,
    applies the pair's synergy boost and keeps the site if its overall score
    reaches min_score. Both thresholds are inclusive.

    Args:
        acetic_facilities: Acetic acid producers
        co2_facilities: CO2 emitters
        provider: Infrastructure context source, queried once per kept pair
        max_distance_km: Maximum pair distance in km
        min_score: Minimum overall score (0-100)
        weights: Overall score weights; defaults to ScoringWeights()

    Returns:
        Sites sorted by overall_score descending; ties keep generation order

    Raises:
        ConfigurationError: If weights do not sum to 1.0 (checked before
            any pair is processed)
        InvalidInputError: If a threshold is out of range

    Example:
        >>> provider = SyntheticInfrastructureProvider(seed=7)
        >>> sites = generate_site_recommendations(acetic, co2, provider)
        >>> print(sites[0].id, sites[0].overall_score)
    """
    # PRE-1: weight configuration
    if weights is None:
        weights = ScoringWeights()
    weights.ensure_normalized()

    # PRE-2: thresholds
    if not (math.isfinite(max_distance_km) and max_distance_km >= 0):
        raise InvalidInputError("max_distance_km", max_distance_km, "must be >= 0")
    if not (0 <= min_score <= 100):
        raise InvalidInputError("min_score", min_score, "must be within [0, 100]")

    sites: list[OverlapSite] = []
    skipped = 0

    for acetic in acetic_facilities:
        for co2 in co2_facilities:
            try:
                distance = haversine_distance_km(
                    acetic.latitude, acetic.longitude, co2.latitude, co2.longitude
                )
                if distance > max_distance_km:
                    continue
                latitude, longitude, factors = _score_pair(acetic, co2, provider)
            except (InvalidInputError, ComputationError) as e:
                skipped += 1
                logger.warning(
                    "Skipping pair (%s, %s): %s", acetic.id, co2.id, e
                )
                continue

            score = overall_score(factors, weights)
            if score < min_score:
                continue

            sites.append(
                OverlapSite(
                    id=f"{SITE_ID_PREFIX}{len(sites) + 1}",
                    latitude=latitude,
                    longitude=longitude,
                    acetic_acid_facilities=(acetic.id,),
                    co2_emitter_facilities=(co2.id,),
                    distance_km=round_half_up(distance, 2),
                    governmental_score=factors.governmental,
                    logistics_score=factors.logistics,
                    policy_incentives_score=factors.policy_incentives,
                    community_readiness_score=factors.community_readiness,
                    overall_score=score,
                )
            )

    logger.debug(
        "Generated %d sites from %dx%d facilities (%d pairs skipped)",
        len(sites),
        len(acetic_facilities),
        len(co2_facilities),
        skipped,
    )
    # sorted() is stable, so equal scores keep pair order
    return sorted(sites, key=lambda s: s.overall_score, reverse=True)
