"""Engine configuration.

Settings are read from environment variables prefixed with SITE_SELECTOR_
(and an optional .env file), e.g. SITE_SELECTOR_MAX_DISTANCE_KM=75.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.siting.services import DEFAULT_MAX_DISTANCE_KM, DEFAULT_MIN_SCORE
from domain.siting.value_objects import ScoringWeights


class EngineSettings(BaseSettings):
    """Thresholds, score weights and randomness for a generation run."""

    model_config = SettingsConfigDict(
        env_prefix="SITE_SELECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_distance_km: float = Field(
        default=DEFAULT_MAX_DISTANCE_KM, ge=0, description="Maximum pair distance (km)"
    )
    min_score: float = Field(
        default=DEFAULT_MIN_SCORE, ge=0, le=100, description="Minimum overall score"
    )

    # Overall score weights; must sum to 1.0 (checked by scoring_weights())
    weight_governmental: float = Field(default=0.30, ge=0)
    weight_logistics: float = Field(default=0.25, ge=0)
    weight_policy_incentives: float = Field(default=0.25, ge=0)
    weight_community_readiness: float = Field(default=0.20, ge=0)

    random_seed: int | None = Field(
        default=None, description="Seed for synthetic infrastructure context"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def scoring_weights(self) -> ScoringWeights:
        """Build validated weights.

        Raises:
            ConfigurationError: If the four weights do not sum to 1.0
        """
        return ScoringWeights(
            governmental=self.weight_governmental,
            logistics=self.weight_logistics,
            policy_incentives=self.weight_policy_incentives,
            community_readiness=self.weight_community_readiness,
        )
