"""Result models — simulation output contracts."""

from synergy_sim.models.results import (
    SimulationOutcomes,
    SimulationResult,
)

__all__ = [
    "SimulationOutcomes",
    "SimulationResult",
]
