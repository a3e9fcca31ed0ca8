"""Facilities Bounded Context - Domain Services.

Record parsing, aggregate statistics and filters over facility lists.
NO I/O operations - raw records arrive as mappings from whatever feed
adapter fetched them.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

import numpy as np
from pydantic import BaseModel, ConfigDict, ValidationError

from domain.facilities.errors import InvalidFacilityError
from domain.facilities.value_objects import (
    AceticAcidFacility,
    CO2EmitterFacility,
    Facility,
    FacilityType,
    OperationalStatus,
)
from domain.siting.value_objects import BoundingBox

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Facility)


# ---------------------------------------------------------------------------
# Record Parsing
# ---------------------------------------------------------------------------
def _parse(model: type[F], record: Mapping[str, Any]) -> F:
    try:
        return model.model_validate(record)
    except ValidationError as e:
        record_id = record.get("id") if isinstance(record, Mapping) else None
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "<record>" for err in e.errors()
        )
        raise InvalidFacilityError(
            record_id if isinstance(record_id, str) else None,
            f"invalid fields: {fields}",
        ) from e


def parse_acetic_facility(record: Mapping[str, Any]) -> AceticAcidFacility:
    """Validate one raw acetic acid record.

    Raises:
        InvalidFacilityError: If any field is missing or out of range
    """
    return _parse(AceticAcidFacility, record)


def parse_co2_facility(record: Mapping[str, Any]) -> CO2EmitterFacility:
    """Validate one raw CO2 emitter record.

    Raises:
        InvalidFacilityError: If any field is missing or out of range
    """
    return _parse(CO2EmitterFacility, record)


def _parse_all(model: type[F], records: Iterable[Mapping[str, Any]]) -> list[F]:
    valid: list[F] = []
    for record in records:
        try:
            valid.append(_parse(model, record))
        except InvalidFacilityError as e:
            # Rejected records are dropped; one bad record never blocks the feed
            logger.warning("Skipping %s record: %s", model.__name__, e)
    return valid


def parse_acetic_facilities(
    records: Iterable[Mapping[str, Any]],
) -> list[AceticAcidFacility]:
    """Return the valid acetic acid facilities, in input order."""
    return _parse_all(AceticAcidFacility, records)


def parse_co2_facilities(
    records: Iterable[Mapping[str, Any]],
) -> list[CO2EmitterFacility]:
    """Return the valid CO2 emitter facilities, in input order."""
    return _parse_all(CO2EmitterFacility, records)


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------
class CapacityStatistics(BaseModel):
    total_facilities: int
    total_capacity: float
    avg_capacity: int
    max_capacity: float
    min_capacity: float
    status_distribution: dict[OperationalStatus, int]

    model_config = ConfigDict(frozen=True)


class EmissionStatistics(BaseModel):
    total_facilities: int
    total_emissions: float
    avg_emissions: int
    max_emissions: float
    min_emissions: float
    type_distribution: dict[FacilityType, int]
    status_distribution: dict[OperationalStatus, int]

    model_config = ConfigDict(frozen=True)


def _status_distribution(facilities: Sequence[Facility]) -> dict[OperationalStatus, int]:
    return dict(Counter(f.operational_status for f in facilities))


def capacity_statistics(
    facilities: Sequence[AceticAcidFacility],
) -> CapacityStatistics | None:
    """Summarize capacities of acetic acid facilities; None for an empty list."""
    if not facilities:
        return None
    capacities = np.array([f.capacity for f in facilities], dtype=np.float64)
    return CapacityStatistics(
        total_facilities=len(facilities),
        total_capacity=float(capacities.sum()),
        avg_capacity=int(np.floor(capacities.mean() + 0.5)),
        max_capacity=float(capacities.max()),
        min_capacity=float(capacities.min()),
        status_distribution=_status_distribution(facilities),
    )


def emission_statistics(
    facilities: Sequence[CO2EmitterFacility],
) -> EmissionStatistics | None:
    """Summarize emission rates of CO2 emitters; None for an empty list."""
    if not facilities:
        return None
    emissions = np.array([f.co2_emission_rate for f in facilities], dtype=np.float64)
    return EmissionStatistics(
        total_facilities=len(facilities),
        total_emissions=float(emissions.sum()),
        avg_emissions=int(np.floor(emissions.mean() + 0.5)),
        max_emissions=float(emissions.max()),
        min_emissions=float(emissions.min()),
        type_distribution=dict(Counter(f.facility_type for f in facilities)),
        status_distribution=_status_distribution(facilities),
    )


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------
def filter_by_bounds(facilities: Iterable[F], bounds: BoundingBox) -> list[F]:
    """Keep facilities inside the box (edges inclusive)."""
    return [f for f in facilities if bounds.contains(f.latitude, f.longitude)]


def filter_by_status(
    facilities: Iterable[F], statuses: Iterable[OperationalStatus | str]
) -> list[F]:
    wanted = {OperationalStatus(s) for s in statuses}
    return [f for f in facilities if f.operational_status in wanted]


def filter_by_capacity(
    facilities: Iterable[AceticAcidFacility],
    min_capacity: float,
    max_capacity: float | None = None,
) -> list[AceticAcidFacility]:
    """Keep facilities with min_capacity <= capacity (<= max_capacity if given)."""
    return [
        f
        for f in facilities
        if f.capacity >= min_capacity
        and (max_capacity is None or f.capacity <= max_capacity)
    ]


def filter_by_emissions(
    facilities: Iterable[CO2EmitterFacility],
    min_emissions: float,
    max_emissions: float | None = None,
) -> list[CO2EmitterFacility]:
    """Keep emitters with min_emissions <= rate (<= max_emissions if given)."""
    return [
        f
        for f in facilities
        if f.co2_emission_rate >= min_emissions
        and (max_emissions is None or f.co2_emission_rate <= max_emissions)
    ]


def filter_by_type(
    facilities: Iterable[CO2EmitterFacility], types: Iterable[FacilityType | str]
) -> list[CO2EmitterFacility]:
    wanted = {FacilityType(t) for t in types}
    return [f for f in facilities if f.facility_type in wanted]
