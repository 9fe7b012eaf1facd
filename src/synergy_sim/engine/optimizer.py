"""Mix optimizer — which solar/wind split maximizes the synergy score?

Search strategy (exhaustive grid, the model is cheap):
  1. Build an adoption grid ``[min_adoption, max_adoption]`` with ``step``
  2. Run the model at every (solar, wind) pair for the chosen policy
  3. Keep the highest synergy score; ties go to the lower economic impact,
     then to the lower combined adoption
  4. Return ``MixSearchResult`` with the winner and the full score surface
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, Field

from synergy_sim.config.parameters import PolicyStrength, SimulationParameters
from synergy_sim.engine.orchestrator import resolve_challenge, run_simulation
from synergy_sim.engine.synergy import compute_synergy_score
from synergy_sim.models.results import SimulationOutcomes


class MixSearchResult(BaseModel):
    """Best mix found on the grid."""

    challenge: str
    policy_strength: PolicyStrength
    best_parameters: SimulationParameters
    best_outcomes: SimulationOutcomes
    best_synergy_score: int
    evaluated: int
    """Number of grid points run."""
    adoption_grid: list[float] = Field(default_factory=list)
    synergy_surface: list[list[int]] = Field(default_factory=list)
    """``synergy_surface[i][j]`` = score at solar=grid[i], wind=grid[j]."""


def adoption_grid(min_adoption: float, max_adoption: float, step: float) -> np.ndarray:
    """Inclusive grid of adoption values."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if max_adoption < min_adoption:
        raise ValueError(f"max_adoption ({max_adoption}) < min_adoption ({min_adoption})")
    n = int(np.floor((max_adoption - min_adoption) / step + 1e-9)) + 1
    return min_adoption + step * np.arange(n, dtype=float)


def find_best_mix(
    challenge: str,
    policy_strength: PolicyStrength = "moderate",
    step: float = 10.0,
    min_adoption: float = 0.0,
    max_adoption: float = 100.0,
) -> MixSearchResult:
    """Grid-search the solar × wind plane for the best synergy score.

    Raises ``ValueError`` for a non-positive step or an inverted range.
    """
    grid = adoption_grid(min_adoption, max_adoption, step)
    surface = np.zeros((grid.size, grid.size), dtype=int)
    costs = np.zeros_like(surface, dtype=float)
    outcomes_at: dict[tuple[int, int], SimulationOutcomes] = {}

    for i, solar in enumerate(grid):
        for j, wind in enumerate(grid):
            params = SimulationParameters(
                solar_energy_adoption=float(solar),
                wind_energy_adoption=float(wind),
                policy_strength=policy_strength,
            )
            outcomes = run_simulation(challenge, params)
            surface[i, j] = compute_synergy_score(outcomes)
            costs[i, j] = outcomes.economic_impact
            outcomes_at[(i, j)] = outcomes

    # Highest score, then cheapest, then least total adoption
    totals = grid[:, None] + grid[None, :]
    order = np.lexsort((totals.ravel(), costs.ravel(), -surface.ravel()))
    best_i, best_j = np.unravel_index(order[0], surface.shape)

    best_params = SimulationParameters(
        solar_energy_adoption=float(grid[best_i]),
        wind_energy_adoption=float(grid[best_j]),
        policy_strength=policy_strength,
    )

    return MixSearchResult(
        challenge=resolve_challenge(challenge),
        policy_strength=policy_strength,
        best_parameters=best_params,
        best_outcomes=outcomes_at[(int(best_i), int(best_j))],
        best_synergy_score=int(surface[best_i, best_j]),
        evaluated=int(surface.size),
        adoption_grid=[float(g) for g in grid],
        synergy_surface=surface.tolist(),
    )
