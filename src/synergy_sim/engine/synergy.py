"""Synergy scores — the headline number players compare and rank by.

Two distinct scores:

  ``compute_synergy_score(outcomes)``
      Weighted blend of the outcome scores plus a temperature-efficiency
      term.  A pure function of ``SimulationOutcomes`` so a persisted
      solution can always be re-scored without re-running the model.

  ``compute_parameter_synergy(parameters)``
      Input-only heuristic: how well the chosen levers complement each
      other, before any simulation.
"""

from __future__ import annotations

from synergy_sim.config.constants import DEFAULT_POLICY_TABLE, PolicyTable
from synergy_sim.config.parameters import SimulationParameters
from synergy_sim.engine.scoring import clamp, round_score
from synergy_sim.models.results import SimulationOutcomes

# Weights: efficiency, sustainability, feasibility, global impact
SYNERGY_WEIGHTS = (0.3, 0.3, 0.2, 0.2)
EFFICIENCY_PER_DEGREE = 20.0


def temperature_efficiency(temperature_change: float) -> float:
    """100 at 0 °C, dropping 20 points per degree, floored at 0."""
    return max(0.0, 100.0 - abs(temperature_change) * EFFICIENCY_PER_DEGREE)


def compute_synergy_score(outcomes: SimulationOutcomes) -> int:
    """Blend outcome scores into one 0–100 integer."""
    w_eff, w_sus, w_feas, w_glob = SYNERGY_WEIGHTS
    blended = (
        temperature_efficiency(outcomes.temperature_change) * w_eff
        + outcomes.sustainability_score * w_sus
        + outcomes.feasibility_score * w_feas
        + outcomes.global_impact_score * w_glob
    )
    return round_score(blended)


def compute_parameter_synergy(
    parameters: SimulationParameters,
    policy: PolicyTable = DEFAULT_POLICY_TABLE,
) -> int:
    """Score how well the levers work together, in [20, 100]."""
    solar = parameters.solar_energy_adoption
    wind = parameters.wind_energy_adoption
    total = parameters.total_adoption
    multiplier = policy.multiplier(parameters.policy_strength)

    score = 60.0

    # Diversification
    balance = abs(solar - wind)
    if balance < 15:
        score += 15
    elif balance < 30:
        score += 8
    elif balance < 50:
        score += 3

    # Ambition matched by policy
    if total > 120 and multiplier >= 1.5:
        score += 20
    elif total > 80 and multiplier >= 1.2:
        score += 12
    elif total < 60 and multiplier <= 1.0:
        score -= 10

    if solar > 90 or wind > 90:
        score -= 8
    if solar < 10 and wind < 10:
        score -= 15

    return round_score(clamp(score, 20.0, 100.0))
