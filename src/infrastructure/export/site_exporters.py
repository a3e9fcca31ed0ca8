"""Export formatters for ranked site lists.

Serializes OverlapSite sequences for downstream consumers:
- sites_to_csv: delimited text with a fixed 11-column header
- sites_to_geojson: GeoJSON FeatureCollection of Point features

Formatters return in-memory values; writing them anywhere is the caller's job.
Property names use the camelCase keys of the external site contract.
"""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable, Sequence
from typing import Any

from domain.siting.value_objects import OverlapSite

CSV_HEADER: tuple[str, ...] = (
    "Site ID",
    "Latitude",
    "Longitude",
    "Distance (km)",
    "Governmental Score",
    "Logistics Score",
    "Policy Incentives Score",
    "Community Readiness Score",
    "Overall Score",
    "Acetic Acid Facilities",
    "CO2 Emitter Facilities",
)

FACILITY_ID_SEPARATOR = ";"


def _format_number(value: float) -> str:
    """Render integral floats without a trailing '.0' (85.0 -> '85')."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def site_to_row(site: OverlapSite) -> list[str]:
    return [
        site.id,
        f"{site.latitude:.6f}",
        f"{site.longitude:.6f}",
        _format_number(site.distance_km),
        _format_number(site.governmental_score),
        _format_number(site.logistics_score),
        _format_number(site.policy_incentives_score),
        _format_number(site.community_readiness_score),
        str(site.overall_score),
        FACILITY_ID_SEPARATOR.join(site.acetic_acid_facilities),
        FACILITY_ID_SEPARATOR.join(site.co2_emitter_facilities),
    ]


def sites_to_csv(sites: Iterable[OverlapSite]) -> str:
    """Serialize sites to CSV text: header row, then one row per site.

    Rows are separated by '\\n' with no trailing newline. Fields containing
    the delimiter or quotes are quoted per RFC 4180.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for site in sites:
        writer.writerow(site_to_row(site))
    return buffer.getvalue().rstrip("\n")


def site_to_feature(site: OverlapSite) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [site.longitude, site.latitude],  # GeoJSON is lon, lat
        },
        "properties": {
            "id": site.id,
            "distance": site.distance_km,
            "governmentalScore": site.governmental_score,
            "logisticsScore": site.logistics_score,
            "policyIncentivesScore": site.policy_incentives_score,
            "communityReadinessScore": site.community_readiness_score,
            "overallScore": site.overall_score,
            "aceticAcidFacilities": list(site.acetic_acid_facilities),
            "co2EmitterFacilities": list(site.co2_emitter_facilities),
        },
    }


def sites_to_geojson(sites: Iterable[OverlapSite]) -> dict[str, Any]:
    """Build a GeoJSON FeatureCollection with one Point feature per site."""
    return {
        "type": "FeatureCollection",
        "features": [site_to_feature(site) for site in sites],
    }


def dumps_geojson(sites: Sequence[OverlapSite], indent: int | None = 2) -> str:
    return json.dumps(sites_to_geojson(sites), indent=indent)
