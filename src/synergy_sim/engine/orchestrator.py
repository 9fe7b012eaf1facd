"""Challenge dispatch — the single entry point for a simulation run.

Each challenge identifier maps to a pure model function with the same
``(SimulationParameters) -> SimulationOutcomes`` contract.  Identifiers not
in the table fall back to ``reduce_emissions``; that is documented
behaviour, not an error.

Entry points:
  - ``run_simulation(challenge, parameters)`` → ``SimulationOutcomes``
  - ``run_full(challenge, parameters)``       → ``SimulationResult`` (outcomes + derived insights)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from synergy_sim.config.parameters import DEFAULT_CHALLENGE, SimulationParameters
from synergy_sim.engine.emissions import simulate_emission_reduction
from synergy_sim.engine.insights import benchmark_solution, suggest_optimizations, synergy_tip
from synergy_sim.engine.reforestation import simulate_reforestation
from synergy_sim.engine.synergy import compute_parameter_synergy, compute_synergy_score
from synergy_sim.models.results import SimulationOutcomes, SimulationResult

logger = logging.getLogger(__name__)

ChallengeModel = Callable[[SimulationParameters], SimulationOutcomes]

CHALLENGE_MODELS: Mapping[str, ChallengeModel] = MappingProxyType({
    "reduce_emissions": simulate_emission_reduction,
    "reforestation": simulate_reforestation,
})


def resolve_challenge(challenge: str) -> str:
    """Map a requested challenge to the model that will run it."""
    if challenge in CHALLENGE_MODELS:
        return challenge
    logger.debug("Unknown challenge %r, falling back to %s", challenge, DEFAULT_CHALLENGE)
    return DEFAULT_CHALLENGE


def run_simulation(challenge: str, parameters: SimulationParameters) -> SimulationOutcomes:
    """Project outcomes for *parameters* under *challenge*.

    Deterministic: identical inputs always give identical outcomes.
    """
    resolved = resolve_challenge(challenge)
    outcomes = CHALLENGE_MODELS[resolved](parameters)
    logger.debug(
        "Simulated %s (solar=%s, wind=%s, policy=%s) -> co2=%s temp=%s",
        resolved,
        parameters.solar_energy_adoption,
        parameters.wind_energy_adoption,
        parameters.policy_strength,
        outcomes.co2_reduction,
        outcomes.temperature_change,
    )
    return outcomes


def run_full(challenge: str, parameters: SimulationParameters) -> SimulationResult:
    """Run the model and attach synergy scores, benchmark and suggestions."""
    outcomes = run_simulation(challenge, parameters)
    synergy = compute_synergy_score(outcomes)

    return SimulationResult(
        challenge=challenge,
        resolved_challenge=resolve_challenge(challenge),
        parameters=parameters,
        outcomes=outcomes,
        synergy_score=synergy,
        parameter_synergy=compute_parameter_synergy(parameters),
        benchmark=benchmark_solution(outcomes),
        synergy_tip=synergy_tip(synergy),
        suggestions=suggest_optimizations(parameters, outcomes),
    )
