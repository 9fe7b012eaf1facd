"""Engine — deterministic challenge models, scoring, and analysis helpers."""

from synergy_sim.engine.emissions import simulate_emission_reduction
from synergy_sim.engine.reforestation import simulate_reforestation
from synergy_sim.engine.scoring import (
    feasibility_score,
    global_impact_score,
    round_half_up,
    sustainability_score,
)
from synergy_sim.engine.synergy import compute_parameter_synergy, compute_synergy_score
from synergy_sim.engine.insights import benchmark_solution, suggest_optimizations, synergy_tip
from synergy_sim.engine.orchestrator import CHALLENGE_MODELS, resolve_challenge, run_full, run_simulation
from synergy_sim.engine.sensitivity import SensitivityResult, TornadoBar, run_sensitivity
from synergy_sim.engine.optimizer import MixSearchResult, find_best_mix

__all__ = [
    "simulate_emission_reduction",
    "simulate_reforestation",
    "feasibility_score",
    "global_impact_score",
    "round_half_up",
    "sustainability_score",
    "compute_parameter_synergy",
    "compute_synergy_score",
    "benchmark_solution",
    "suggest_optimizations",
    "synergy_tip",
    "CHALLENGE_MODELS",
    "resolve_challenge",
    "run_full",
    "run_simulation",
    # Analysis
    "SensitivityResult",
    "TornadoBar",
    "run_sensitivity",
    "MixSearchResult",
    "find_best_mix",
]
