#!/usr/bin/env python3
"""Rank candidate co-location sites from facility JSON files.

Each input file holds a JSON array of facility records (or an object with a
"data" array, as returned by the facility feeds).

Usage:
    python scripts/rank_sites.py --acetic acetic.json --co2 co2.json \\
        --max-distance 75 --seed 42 --csv sites.csv --geojson sites.geojson

Defaults for thresholds, weights and seed come from SITE_SELECTOR_* environment
variables (see src/config.py); command-line flags override them.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from domain.siting.errors import SitingError
from src.config import EngineSettings
from src.infrastructure.export import dumps_geojson, sites_to_csv
from src.site_analysis import analyze_sites

logger = logging.getLogger("rank_sites")


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read facility records from a JSON file."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("data", [])
    if not isinstance(payload, list):
        raise ValueError(f"{path.name}: expected a JSON array of facility records")
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--acetic", type=Path, required=True, help="Acetic acid JSON")
    parser.add_argument("--co2", type=Path, required=True, help="CO2 emitter JSON")
    parser.add_argument("--max-distance", type=float, help="Max pair distance (km)")
    parser.add_argument("--min-score", type=float, help="Minimum overall score")
    parser.add_argument("--seed", type=int, help="Seed for synthetic context")
    parser.add_argument("--csv", type=Path, help="Write ranked sites as CSV")
    parser.add_argument("--geojson", type=Path, help="Write ranked sites as GeoJSON")
    parser.add_argument("--top", type=int, default=10, help="Sites to print")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the analysis.

    Returns:
        0 on success, 1 on failure
    """
    args = build_parser().parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.max_distance is not None:
        overrides["max_distance_km"] = args.max_distance
    if args.min_score is not None:
        overrides["min_score"] = args.min_score
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    try:
        settings = EngineSettings(**overrides)
    except ValidationError as e:
        print(f"Invalid settings: {e}")
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        acetic = load_records(args.acetic)
        co2 = load_records(args.co2)
    except (OSError, ValueError) as e:
        logger.error("Cannot read facility records: %s", e)
        return 1

    try:
        report = analyze_sites(acetic, co2, settings=settings)
    except SitingError as e:
        logger.error("Site analysis failed: %s", e)
        return 1

    print(f"{report.count} candidate sites")
    for site in report.sites[: args.top]:
        print(
            f"  {site.id:>10}  score={site.overall_score:3d}  "
            f"({site.latitude:.4f}, {site.longitude:.4f})  "
            f"{site.distance_km:.2f} km  "
            f"{','.join(site.acetic_acid_facilities)} + "
            f"{','.join(site.co2_emitter_facilities)}"
        )

    try:
        if args.csv is not None:
            args.csv.write_text(sites_to_csv(report.sites) + "\n", encoding="utf-8")
            logger.info("Wrote %s", args.csv.name)
        if args.geojson is not None:
            args.geojson.write_text(dumps_geojson(report.sites), encoding="utf-8")
            logger.info("Wrote %s", args.geojson.name)
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
