"""Facilities Bounded Context - Error Hierarchy."""

from __future__ import annotations


class FacilityError(Exception):
    """Base error for facility operations."""


class InvalidFacilityError(FacilityError):
    """A raw facility record failed schema validation.

    Attributes:
        record_id: The record's "id" if one could be read, else None
    """

    def __init__(self, record_id: str | None, reason: str) -> None:
        self.record_id = record_id
        super().__init__(f"Invalid facility record {record_id!r}: {reason}")
