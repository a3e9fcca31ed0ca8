"""Siting Bounded Context - Site Analytics.

Aggregates and score filters over a generated site list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from domain.siting.scoring import round_half_up
from domain.siting.value_objects import OverlapSite, ScoreSummary, SiteStatistics


def _summarize(values: Sequence[float]) -> ScoreSummary:
    arr = np.asarray(values, dtype=np.float64)
    return ScoreSummary(
        avg=int(round_half_up(float(arr.mean()))),
        max=float(arr.max()),
        min=float(arr.min()),
    )


def site_statistics(sites: Sequence[OverlapSite]) -> SiteStatistics | None:
    """Summarize sub-scores, overall score and distance; None for no sites."""
    if not sites:
        return None
    distances = np.asarray([s.distance_km for s in sites], dtype=np.float64)
    return SiteStatistics(
        total_sites=len(sites),
        governmental=_summarize([s.governmental_score for s in sites]),
        logistics=_summarize([s.logistics_score for s in sites]),
        policy_incentives=_summarize([s.policy_incentives_score for s in sites]),
        community_readiness=_summarize(
            [s.community_readiness_score for s in sites]
        ),
        overall=_summarize([s.overall_score for s in sites]),
        avg_distance_km=round_half_up(float(distances.mean()), 2),
    )


def filter_sites_by_score(
    sites: Iterable[OverlapSite],
    min_overall: float | None = None,
    min_governmental: float | None = None,
    min_logistics: float | None = None,
    min_policy_incentives: float | None = None,
    min_community_readiness: float | None = None,
) -> list[OverlapSite]:
    """Keep sites meeting every given minimum (inclusive); None disables a check.

    Preserves input order.
    """
    criteria = (
        ("overall_score", min_overall),
        ("governmental_score", min_governmental),
        ("logistics_score", min_logistics),
        ("policy_incentives_score", min_policy_incentives),
        ("community_readiness_score", min_community_readiness),
    )
    active = [(field, minimum) for field, minimum in criteria if minimum is not None]
    return [
        site
        for site in sites
        if all(getattr(site, field) >= minimum for field, minimum in active)
    ]
