"""Siting Bounded Context - Value Objects.

Immutable data structures for candidate-site generation and scoring.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.siting.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Numeric Constants
# ---------------------------------------------------------------------------
WEIGHT_SUM_TOLERANCE = 1e-6  # Accepted deviation of the weight sum from 1.0
SCORE_MIN = 0.0
SCORE_MAX = 100.0


class Zone(str, Enum):
    """Coarse regulatory zone used as a scoring prior."""

    GULF_COAST = "gulf-coast"
    MIDWEST = "midwest"
    NORTHEAST = "northeast"
    WEST_COAST = "west-coast"
    SOUTHEAST = "southeast"


class PopulationDensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class BoundingBox(BaseModel):
    """Geographic extent in EPSG:4326 (Value Object).

    Invariants are enforced at construction time - invalid BoundingBox
    cannot be instantiated. Containment checks are inclusive on every edge.
    """

    min_x: float  # Western boundary (longitude)
    min_y: float  # Southern boundary (latitude)
    max_x: float  # Eastern boundary (longitude)
    max_y: float  # Northern boundary (latitude)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bounds(self) -> "BoundingBox":
        # Longitude range
        if not (-180 <= self.min_x <= 180):
            raise ValueError(f"min_x longitude out of range: {self.min_x}")
        if not (-180 <= self.max_x <= 180):
            raise ValueError(f"max_x longitude out of range: {self.max_x}")
        # Latitude range
        if not (-90 <= self.min_y <= 90):
            raise ValueError(f"min_y latitude out of range: {self.min_y}")
        if not (-90 <= self.max_y <= 90):
            raise ValueError(f"max_y latitude out of range: {self.max_y}")
        # Ordering
        if not (self.min_x < self.max_x):
            raise ValueError(
                f"Invalid x ordering: min_x={self.min_x} >= max_x={self.max_x}"
            )
        if not (self.min_y < self.max_y):
            raise ValueError(
                f"Invalid y ordering: min_y={self.min_y} >= max_y={self.max_y}"
            )
        return self

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.min_x <= longitude <= self.max_x
            and self.min_y <= latitude <= self.max_y
        )


# ---------------------------------------------------------------------------
# Geographic Context
# ---------------------------------------------------------------------------
class InfrastructureProfile(BaseModel):
    """Infrastructure proximity and demographics at a single coordinate.

    Produced by an InfrastructureProvider; the zone is added separately by
    the regional classifier.
    """

    near_port: bool
    near_highway: bool
    near_rail: bool
    near_pipeline: bool
    near_power_grid: bool
    population_density: PopulationDensity
    industrial_zoning: bool

    model_config = ConfigDict(frozen=True)


class GeographicContext(InfrastructureProfile):
    """Zone plus infrastructure profile for a candidate coordinate.

    Derived and ephemeral: computed per coordinate, never persisted.
    """

    region: Zone

    @classmethod
    def from_profile(
        cls, region: Zone, profile: InfrastructureProfile
    ) -> "GeographicContext":
        return cls(region=region, **profile.model_dump())


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------
class ScoringFactors(BaseModel):
    """The four sub-scores of a candidate site, each in [0, 100]."""

    governmental: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    logistics: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    policy_incentives: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    community_readiness: float = Field(ge=SCORE_MIN, le=SCORE_MAX)

    model_config = ConfigDict(frozen=True)


class ScoringWeights(BaseModel):
    """Weights of the overall score (Value Object).

    Invariants:
        SW-1: every weight >= 0
        SW-2: weights sum to 1.0 within WEIGHT_SUM_TOLERANCE

    Violations raise ConfigurationError. A weight set is never renormalized,
    since that would hide an operator mistake.
    """

    governmental: float = 0.30
    logistics: float = 0.25
    policy_incentives: float = 0.25
    community_readiness: float = 0.20

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_weights(self) -> "ScoringWeights":
        self.ensure_normalized()
        return self

    def total(self) -> float:
        return (
            self.governmental
            + self.logistics
            + self.policy_incentives
            + self.community_readiness
        )

    def ensure_normalized(self) -> None:
        """Raise ConfigurationError unless SW-1 and SW-2 hold.

        Called again by the site generator, since model_construct() and
        model_copy() skip validation.
        """
        weights = (
            self.governmental,
            self.logistics,
            self.policy_incentives,
            self.community_readiness,
        )
        if any(not math.isfinite(w) or w < 0 for w in weights):
            raise ConfigurationError(f"Scoring weights must be >= 0: {weights}")
        total = self.total()
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ConfigurationError(
                f"Scoring weights must sum to 1.0, got {total:.6f}"
            )


# ---------------------------------------------------------------------------
# Overlap Site
# ---------------------------------------------------------------------------
class OverlapSite(BaseModel):
    """Candidate co-location site derived from one facility pair (Value Object).

    Created once per qualifying pair within a single generation run and never
    mutated afterwards.

    Invariants:
        OS-1: every sub-score in [0, 100]
        OS-2: overall_score in [0, 100]
        OS-3: distance_km >= 0
    """

    id: str  # "site-<n>", sequential within one generation run
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    acetic_acid_facilities: tuple[str, ...]
    co2_emitter_facilities: tuple[str, ...]
    distance_km: float = Field(ge=0)  # Pair distance, rounded to 2 decimals
    governmental_score: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    logistics_score: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    policy_incentives_score: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    community_readiness_score: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    overall_score: int = Field(ge=0, le=100)

    model_config = ConfigDict(frozen=True)

    def factors(self) -> ScoringFactors:
        """Return the four sub-scores as ScoringFactors."""
        return ScoringFactors(
            governmental=self.governmental_score,
            logistics=self.logistics_score,
            policy_incentives=self.policy_incentives_score,
            community_readiness=self.community_readiness_score,
        )


# ---------------------------------------------------------------------------
# Site Statistics
# ---------------------------------------------------------------------------
class ScoreSummary(BaseModel):
    avg: int
    max: float
    min: float

    model_config = ConfigDict(frozen=True)


class SiteStatistics(BaseModel):
    """Aggregate view over a generated site list."""

    total_sites: int = Field(gt=0)
    governmental: ScoreSummary
    logistics: ScoreSummary
    policy_incentives: ScoreSummary
    community_readiness: ScoreSummary
    overall: ScoreSummary
    avg_distance_km: float = Field(ge=0)

    model_config = ConfigDict(frozen=True)
