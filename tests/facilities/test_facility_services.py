"""Tests for facility parsing, statistics and filters."""

from __future__ import annotations

import pytest

from domain.facilities.errors import InvalidFacilityError
from domain.facilities.services import (
    capacity_statistics,
    emission_statistics,
    filter_by_bounds,
    filter_by_capacity,
    filter_by_emissions,
    filter_by_status,
    filter_by_type,
    parse_acetic_facilities,
    parse_acetic_facility,
    parse_co2_facilities,
    parse_co2_facility,
)
from domain.facilities.value_objects import FacilityType, OperationalStatus
from domain.siting.value_objects import BoundingBox
from tests.factories import CHICAGO, acetic_record, co2_record, make_acetic, make_co2


# ===========================================================================
# Parsing
# ===========================================================================
def test_parse_acetic_record_with_feed_keys():
    facility = parse_acetic_facility(acetic_record("aa-001"))

    assert facility.id == "aa-001"
    assert facility.capacity == 500_000
    assert facility.operational_status is OperationalStatus.ACTIVE
    assert facility.last_updated.year == 2024


def test_parse_co2_record_with_feed_keys():
    facility = parse_co2_facility(co2_record("co2-001", facilityType="cement"))

    assert facility.co2_emission_rate == 2_500_000
    assert facility.facility_type is FacilityType.CEMENT


@pytest.mark.parametrize(
    "overrides",
    [
        {"latitude": 91.0},
        {"longitude": -180.5},
        {"capacity": 0},
        {"capacity": -10},
        {"operationalStatus": "demolished"},
        {"latitude": "north"},
        {"latitude": "29.7604"},
        {"capacity": "500000"},
        {"capacity": True},
    ],
)
def test_parse_acetic_rejects_invalid_records(overrides):
    with pytest.raises(InvalidFacilityError) as exc_info:
        parse_acetic_facility(acetic_record("aa-bad", **overrides))
    assert exc_info.value.record_id == "aa-bad"


@pytest.mark.parametrize(
    "overrides",
    [
        {"co2EmissionRate": 0},
        {"co2EmissionRate": "2500000"},
        {"facilityType": "bakery"},
        {"latitude": float("nan")},
        {"longitude": "-95.3698"},
    ],
)
def test_parse_co2_rejects_invalid_records(overrides):
    with pytest.raises(InvalidFacilityError):
        parse_co2_facility(co2_record("co2-bad", **overrides))


def test_parse_rejects_missing_fields():
    record = acetic_record("aa-001")
    del record["capacity"]
    with pytest.raises(InvalidFacilityError, match="capacity"):
        parse_acetic_facility(record)


def test_parse_many_drops_invalid_and_logs(caplog):
    records = [
        acetic_record("aa-1"),
        acetic_record("aa-2", capacity=-1),
        acetic_record("aa-3", latitude=CHICAGO[0], longitude=CHICAGO[1]),
    ]

    with caplog.at_level("WARNING", logger="domain.facilities.services"):
        facilities = parse_acetic_facilities(records)

    assert [f.id for f in facilities] == ["aa-1", "aa-3"]
    assert "aa-2" in caplog.text


def test_parse_many_co2():
    records = [co2_record("c1"), co2_record("c2", facilityType="power"), {"id": 7}]
    assert [f.id for f in parse_co2_facilities(records)] == ["c1", "c2"]


def test_facilities_are_frozen():
    facility = make_acetic()
    with pytest.raises(Exception):
        facility.capacity = 1  # type: ignore[misc]


# ===========================================================================
# Statistics
# ===========================================================================
def test_capacity_statistics():
    facilities = [
        make_acetic("a1", capacity=500_000),
        make_acetic("a2", capacity=250_000, status="planned"),
        make_acetic("a3", capacity=100_001),
    ]

    stats = capacity_statistics(facilities)

    assert stats is not None
    assert stats.total_facilities == 3
    assert stats.total_capacity == 850_001
    assert stats.avg_capacity == 283_334  # 283333.67
    assert (stats.max_capacity, stats.min_capacity) == (500_000, 100_001)
    assert stats.status_distribution == {
        OperationalStatus.ACTIVE: 2,
        OperationalStatus.PLANNED: 1,
    }


def test_emission_statistics():
    facilities = [
        make_co2("c1", rate=2_500_000, facility_type="petrochemical"),
        make_co2("c2", rate=1_800_000, facility_type="steel", status="inactive"),
        make_co2("c3", rate=900_000, facility_type="steel"),
    ]

    stats = emission_statistics(facilities)

    assert stats is not None
    assert stats.total_emissions == 5_200_000
    assert stats.avg_emissions == 1_733_333
    assert stats.type_distribution == {FacilityType.PETROCHEMICAL: 1, FacilityType.STEEL: 2}
    assert stats.status_distribution[OperationalStatus.INACTIVE] == 1


def test_statistics_of_empty_lists_are_none():
    assert capacity_statistics([]) is None
    assert emission_statistics([]) is None


# ===========================================================================
# Filters
# ===========================================================================
def test_filter_by_bounds_inclusive():
    gulf = BoundingBox(min_x=-97, min_y=25, max_x=-87, max_y=32)
    facilities = [
        make_acetic("in"),
        make_acetic("edge", latitude=32.0, longitude=-87.0),
        make_acetic("out", latitude=CHICAGO[0], longitude=CHICAGO[1]),
    ]
    assert [f.id for f in filter_by_bounds(facilities, gulf)] == ["in", "edge"]


def test_filter_by_status_accepts_strings():
    facilities = [make_co2("c1"), make_co2("c2", status="planned"), make_co2("c3", status="inactive")]
    kept = filter_by_status(facilities, ["planned", OperationalStatus.INACTIVE])
    assert [f.id for f in kept] == ["c2", "c3"]


def test_filter_by_capacity_range():
    facilities = [make_acetic(f"a{c}", capacity=c) for c in (100, 200, 300)]
    assert [f.capacity for f in filter_by_capacity(facilities, 200)] == [200, 300]
    assert [f.capacity for f in filter_by_capacity(facilities, 100, 200)] == [100, 200]


def test_filter_by_emissions_range():
    facilities = [make_co2(f"c{r}", rate=r) for r in (1_000, 2_000, 3_000)]
    assert [f.co2_emission_rate for f in filter_by_emissions(facilities, 1_500)] == [2_000, 3_000]
    assert [f.co2_emission_rate for f in filter_by_emissions(facilities, 0, 2_000)] == [1_000, 2_000]


def test_filter_by_type():
    facilities = [
        make_co2("c1", facility_type="steel"),
        make_co2("c2", facility_type="power"),
        make_co2("c3", facility_type="refinery"),
    ]
    assert [f.id for f in filter_by_type(facilities, ["power", "refinery"])] == ["c2", "c3"]


def test_filter_by_type_rejects_unknown_type():
    with pytest.raises(ValueError):
        filter_by_type([make_co2()], ["bakery"])
