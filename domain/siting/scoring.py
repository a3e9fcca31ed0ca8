"""Siting Bounded Context - Scoring Model.

Converts a GeographicContext into four sub-scores and a weighted overall score.

Each sub-score starts from a base (zone rating, or a flat 50 for community
readiness), accumulates signed adjustments from the context, then is clamped
to [0, 100]. The adjustments are kept as tables so they can later be swapped
for real regulatory data without touching the functions below.
"""

from __future__ import annotations

import math

from domain.siting.regions import zone_rating
from domain.siting.value_objects import (
    SCORE_MAX,
    SCORE_MIN,
    GeographicContext,
    PopulationDensity,
    ScoringFactors,
    ScoringWeights,
)

# ---------------------------------------------------------------------------
# Adjustment Tables
# ---------------------------------------------------------------------------
COMMUNITY_READINESS_BASE = 50.0

# Infrastructure flag -> (logistics bonus, governmental bonus)
INFRASTRUCTURE_BONUSES: dict[str, tuple[float, float]] = {
    "near_port": (25, 5),
    "near_highway": (15, 0),
    "near_rail": (20, 0),
    "near_pipeline": (30, 10),
    "near_power_grid": (10, 5),
}

ZONING_GOVERNMENTAL = {True: 10, False: -15}
ZONING_POLICY = {True: 15, False: 0}
ZONING_COMMUNITY = {True: 20, False: 0}

DENSITY_GOVERNMENTAL = {
    PopulationDensity.LOW: 5,
    PopulationDensity.MEDIUM: -5,
    PopulationDensity.HIGH: -15,
}
DENSITY_LOGISTICS = {
    PopulationDensity.LOW: 0,
    PopulationDensity.MEDIUM: 0,
    PopulationDensity.HIGH: -10,
}
DENSITY_POLICY = {
    PopulationDensity.LOW: 10,
    PopulationDensity.MEDIUM: 5,
    PopulationDensity.HIGH: -5,
}
DENSITY_COMMUNITY = {
    PopulationDensity.LOW: 15,
    PopulationDensity.MEDIUM: 5,
    PopulationDensity.HIGH: -20,
}

# Any of these present signals existing heavy infrastructure nearby
COMMUNITY_FAMILIARITY_FLAGS = ("near_port", "near_rail", "near_pipeline")
COMMUNITY_FAMILIARITY_BONUS = 10


def clamp_score(score: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, score))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going up (2.5 -> 3), unlike Python's banker's round()."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------
def governmental_score(context: GeographicContext) -> float:
    """Permitting outlook: zone base, zoning, density, enabling infrastructure."""
    score = zone_rating(context.region).governmental
    score += ZONING_GOVERNMENTAL[context.industrial_zoning]
    score += DENSITY_GOVERNMENTAL[context.population_density]
    for flag, (_, governmental) in INFRASTRUCTURE_BONUSES.items():
        if getattr(context, flag):
            score += governmental
    return clamp_score(score)


def logistics_score(context: GeographicContext) -> float:
    score = zone_rating(context.region).logistics
    for flag, (logistics, _) in INFRASTRUCTURE_BONUSES.items():
        if getattr(context, flag):
            score += logistics
    score += DENSITY_LOGISTICS[context.population_density]
    return clamp_score(score)


def policy_incentives_score(context: GeographicContext) -> float:
    score = zone_rating(context.region).policy
    score += ZONING_POLICY[context.industrial_zoning]
    score += DENSITY_POLICY[context.population_density]
    return clamp_score(score)


def community_readiness_score(context: GeographicContext) -> float:
    score = COMMUNITY_READINESS_BASE
    score += ZONING_COMMUNITY[context.industrial_zoning]
    score += DENSITY_COMMUNITY[context.population_density]
    if any(getattr(context, flag) for flag in COMMUNITY_FAMILIARITY_FLAGS):
        score += COMMUNITY_FAMILIARITY_BONUS
    return clamp_score(score)


def score_context(context: GeographicContext) -> ScoringFactors:
    """Compute all four clamped sub-scores for a context."""
    return ScoringFactors(
        governmental=governmental_score(context),
        logistics=logistics_score(context),
        policy_incentives=policy_incentives_score(context),
        community_readiness=community_readiness_score(context),
    )


# ---------------------------------------------------------------------------
# Overall Score
# ---------------------------------------------------------------------------
def overall_score(factors: ScoringFactors, weights: ScoringWeights | None = None) -> int:
    """Weighted sum of the four sub-scores, rounded half-up to an int.

    Args:
        factors: Sub-scores, each in [0, 100]
        weights: Weight configuration; defaults to ScoringWeights()

    Returns:
        Overall score in [0, 100]

    Raises:
        ConfigurationError: If the weights do not sum to 1.0
    """
    if weights is None:
        weights = ScoringWeights()
    weights.ensure_normalized()
    weighted = (
        factors.governmental * weights.governmental
        + factors.logistics * weights.logistics
        + factors.policy_incentives * weights.policy_incentives
        + factors.community_readiness * weights.community_readiness
    )
    return int(round_half_up(weighted))
