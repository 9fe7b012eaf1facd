"""Synergy Sphere climate simulation engine."""

from synergy_sim.config.parameters import SimulationParameters
from synergy_sim.engine.orchestrator import run_simulation
from synergy_sim.engine.synergy import compute_synergy_score
from synergy_sim.models.results import SimulationOutcomes

__version__ = "1.0.0"

__all__ = [
    "SimulationParameters",
    "SimulationOutcomes",
    "run_simulation",
    "compute_synergy_score",
]
