"""Facilities Bounded Context.

Responsible for the facility records the site generator consumes:
- Value Objects: AceticAcidFacility, CO2EmitterFacility
- Services: record parsing, statistics, filters
"""
