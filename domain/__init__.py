"""Site Selector Domain Layer.

This package contains the core business logic organized by bounded contexts:
- facilities: Acetic acid producers and CO2 emitters, validation, statistics
- siting: Candidate-site generation, scoring, ranking
"""

# Imports alphabetized per project style (isort)
from domain import facilities, siting

__all__ = ["facilities", "siting"]
