"""Siting Bounded Context - Error Hierarchy.

Custom exceptions for site generation and scoring.

None of these subclass ValueError: pydantic only wraps ValueError/AssertionError
raised inside validators, so ConfigurationError raised by ScoringWeights reaches
the caller as-is.
"""

from __future__ import annotations


class SitingError(Exception):
    """Base error for siting operations."""


class InvalidInputError(SitingError):
    """Coordinates or thresholds are outside their valid range.

    Attributes:
        field: Name of the offending input
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class ConfigurationError(SitingError):
    """Scoring weight configuration is invalid (e.g. does not sum to 1.0)."""


class ComputationError(SitingError):
    """A numeric step produced an undefined result (zero weight, NaN)."""
