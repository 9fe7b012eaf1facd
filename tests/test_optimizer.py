"""Tests for engine/optimizer.py — solar × wind grid search.

Covers:
  - adoption_grid construction and validation
  - find_best_mix winner, tie-breaking and result structure
"""

from __future__ import annotations

import pytest

from synergy_sim import compute_synergy_score, run_simulation
from synergy_sim.config import SimulationParameters
from synergy_sim.engine.optimizer import adoption_grid, find_best_mix


# ═══════════════════════════════════════════════════════════════════════════
# Grid
# ═══════════════════════════════════════════════════════════════════════════

class TestAdoptionGrid:

    def test_inclusive_endpoints(self):
        assert adoption_grid(0, 100, 10).tolist() == [float(v) for v in range(0, 101, 10)]

    def test_step_that_does_not_divide_range(self):
        assert adoption_grid(0, 100, 30).tolist() == [0.0, 30.0, 60.0, 90.0]

    def test_single_point(self):
        assert adoption_grid(40, 40, 5).tolist() == [40.0]

    def test_rejects_non_positive_step(self):
        with pytest.raises(ValueError, match="step"):
            adoption_grid(0, 100, 0)

    def test_rejects_inverted_range(self):
        with pytest.raises(ValueError, match="max_adoption"):
            adoption_grid(100, 0, 10)


# ═══════════════════════════════════════════════════════════════════════════
# Search
# ═══════════════════════════════════════════════════════════════════════════

class TestFindBestMix:

    def test_structure(self):
        result = find_best_mix("reduce_emissions", "moderate", step=50)
        assert result.evaluated == 9
        assert result.adoption_grid == [0.0, 50.0, 100.0]
        assert len(result.synergy_surface) == 3
        assert all(len(row) == 3 for row in result.synergy_surface)
        assert result.best_parameters.policy_strength == "moderate"

    def test_winner_is_surface_maximum(self):
        result = find_best_mix("reduce_emissions", "high", step=25)
        best = max(max(row) for row in result.synergy_surface)
        assert result.best_synergy_score == best
        assert compute_synergy_score(result.best_outcomes) == best

    def test_best_outcomes_match_a_fresh_run(self):
        result = find_best_mix("reforestation", "moderate", step=50)
        assert result.best_outcomes == run_simulation("reforestation", result.best_parameters)

    def test_ties_go_to_cheapest(self):
        result = find_best_mix("reduce_emissions", "moderate", step=20)
        grid = result.adoption_grid
        tied_costs = [
            run_simulation("reduce_emissions", SimulationParameters(
                solar_energy_adoption=grid[i], wind_energy_adoption=grid[j], policy_strength="moderate",
            )).economic_impact
            for i, row in enumerate(result.synergy_surface)
            for j, score in enumerate(row)
            if score == result.best_synergy_score
        ]
        assert result.best_outcomes.economic_impact == min(tied_costs)

    def test_unknown_challenge_resolved(self):
        result = find_best_mix("ocean_cleanup", step=50)
        assert result.challenge == "reduce_emissions"

    def test_invalid_step_propagates(self):
        with pytest.raises(ValueError):
            find_best_mix("reduce_emissions", step=-5)
