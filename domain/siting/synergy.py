"""Siting Bounded Context - Synergy Analyzer.

Rewards pairings of high-capacity acetic acid producers with high-emission,
diverse CO2 sources.
"""

from __future__ import annotations

from collections.abc import Sequence

from domain.facilities.value_objects import AceticAcidFacility, CO2EmitterFacility
from domain.siting.scoring import clamp_score
from domain.siting.value_objects import ScoringFactors

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
CAPACITY_THRESHOLD_TPY = 400_000  # Summed acetic capacity must exceed this
EMISSION_THRESHOLD_TPY = 2_000_000  # Summed CO2 emission rate must exceed this
CAPACITY_BONUS = 10
EMISSION_BONUS = 10
TYPE_DIVERSITY_POINTS = 3  # Per distinct CO2 facility type
TYPE_DIVERSITY_CAP = 15
SYNERGY_CAP = 25

GOVERNMENTAL_BOOST_SHARE = 0.3
LOGISTICS_BOOST_SHARE = 0.4


def synergy_bonus(
    acetic_facilities: Sequence[AceticAcidFacility],
    co2_facilities: Sequence[CO2EmitterFacility],
) -> int:
    """Compute the synergy bonus for a facility grouping, in [0, 25]."""
    bonus = 0
    if sum(f.capacity for f in acetic_facilities) > CAPACITY_THRESHOLD_TPY:
        bonus += CAPACITY_BONUS
    if sum(f.co2_emission_rate for f in co2_facilities) > EMISSION_THRESHOLD_TPY:
        bonus += EMISSION_BONUS
    distinct_types = {f.facility_type for f in co2_facilities}
    bonus += min(TYPE_DIVERSITY_POINTS * len(distinct_types), TYPE_DIVERSITY_CAP)
    return min(bonus, SYNERGY_CAP)


def apply_synergy_boost(factors: ScoringFactors, bonus: int) -> ScoringFactors:
    """Add 30% of the bonus to governmental and 40% to logistics.

    The boost is applied to the already-clamped base scores and the result is
    clamped again; policy and community scores are left untouched.
    """
    return factors.model_copy(
        update={
            "governmental": clamp_score(
                factors.governmental + bonus * GOVERNMENTAL_BOOST_SHARE
            ),
            "logistics": clamp_score(factors.logistics + bonus * LOGISTICS_BOOST_SHARE),
        }
    )
