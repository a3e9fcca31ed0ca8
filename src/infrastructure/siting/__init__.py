"""Infrastructure adapters for the siting bounded context.

This module provides InfrastructureProvider implementations used by the
site generator until a GIS-backed provider replaces them.
"""

from .synthetic_context import FixedInfrastructureProvider, SyntheticInfrastructureProvider

__all__ = ["FixedInfrastructureProvider", "SyntheticInfrastructureProvider"]
