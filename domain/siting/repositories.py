"""Domain Port(s) for Site Context.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O or randomness here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import InfrastructureProfile


class InfrastructureProvider(Protocol):
    """Port for obtaining infrastructure/demographic context at a coordinate.

    Implementations live in infrastructure (e.g., the seeded synthetic
    provider, or a GIS-backed lookup).
    """

    def profile_at(self, latitude: float, longitude: float) -> InfrastructureProfile:
        """Return the infrastructure profile at the given coordinate."""
        ...
