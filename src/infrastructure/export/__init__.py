"""Site list export formatters (CSV, GeoJSON)."""

from .site_exporters import CSV_HEADER, dumps_geojson, sites_to_csv, sites_to_geojson

__all__ = ["CSV_HEADER", "dumps_geojson", "sites_to_csv", "sites_to_geojson"]
