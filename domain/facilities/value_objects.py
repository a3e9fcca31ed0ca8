"""Facilities Bounded Context - Value Objects.

Immutable records of geocoded industrial facilities as received from the
upstream facility feeds. All validation occurs at construction time via
Pydantic; an invalid facility cannot be instantiated.

Field aliases match the camelCase keys of the feed payloads.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OperationalStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PLANNED = "planned"


class FacilityType(str, Enum):
    """Industrial category of a CO2 emitter."""

    PETROCHEMICAL = "petrochemical"
    REFINERY = "refinery"
    STEEL = "steel"
    CEMENT = "cement"
    POWER = "power"


class Facility(BaseModel):
    """Fields shared by every facility variant.

    Invariants:
        F-1: latitude in [-90, 90]
        F-2: longitude in [-180, 180]
    """

    id: str = Field(min_length=1)
    name: str
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False, strict=True)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False, strict=True)
    operational_status: OperationalStatus = Field(alias="operationalStatus")
    last_updated: datetime = Field(alias="lastUpdated")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AceticAcidFacility(Facility):
    """Acetic acid producer; capacity in tons/year (> 0)."""

    capacity: float = Field(gt=0, allow_inf_nan=False, strict=True)


class CO2EmitterFacility(Facility):
    """CO2 emitter; emission rate in tons/year (> 0)."""

    co2_emission_rate: float = Field(
        gt=0, alias="co2EmissionRate", allow_inf_nan=False, strict=True
    )
    facility_type: FacilityType = Field(alias="facilityType")
