"""Tests for engine/sensitivity.py — one-at-a-time lever sweeps."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from synergy_sim import compute_synergy_score, run_simulation
from synergy_sim.config import SimulationParameters
from synergy_sim.engine.sensitivity import (
    POLICY_SWEEP_NAME,
    _policy_neighbours,
    run_sensitivity,
)


class TestPolicyNeighbours:

    def test_middle_of_scale(self):
        assert _policy_neighbours("moderate") == ("low", "high")
        assert _policy_neighbours("high") == ("moderate", "maximum")

    def test_pinned_at_ends(self):
        assert _policy_neighbours("low") == ("low", "moderate")
        assert _policy_neighbours("maximum") == ("high", "maximum")


class TestRunSensitivity:

    def test_default_sweeps(self, balanced):
        result = run_sensitivity("reduce_emissions", balanced)
        assert result.challenge == "reduce_emissions"
        assert result.base_synergy == 79
        assert {b.param_path for b in result.bars} == {
            "solar_energy_adoption", "wind_energy_adoption", "policy_strength",
        }

    def test_sorted_by_swing(self, balanced):
        bars = run_sensitivity("reduce_emissions", balanced).bars
        deltas = [b.delta_synergy for b in bars]
        assert deltas == sorted(deltas, reverse=True)

    def test_bar_values(self, balanced):
        bars = {b.param_path: b for b in run_sensitivity("reduce_emissions", balanced).bars}

        solar = bars["solar_energy_adoption"]
        assert (solar.base_value, solar.low_value, solar.high_value) == (65.0, 45.0, 85.0)
        assert solar.synergy_at_low == compute_synergy_score(run_simulation(
            "reduce_emissions", balanced.model_copy(update={"solar_energy_adoption": 45.0}),
        ))
        assert solar.delta_synergy == abs(solar.synergy_at_high - solar.synergy_at_low)

        policy = bars["policy_strength"]
        assert policy.param_name == POLICY_SWEEP_NAME
        assert (policy.base_value, policy.low_value, policy.high_value) == ("moderate", "low", "high")

    def test_custom_sweep_without_policy(self, balanced):
        result = run_sensitivity(
            "reforestation", balanced,
            sweeps=[("Wind coverage", "wind_energy_adoption", -10.0, 10.0)],
            include_policy=False,
        )
        assert len(result.bars) == 1
        bar = result.bars[0]
        assert bar.param_name == "Wind coverage"
        assert (bar.low_value, bar.high_value) == (35.0, 55.0)

    def test_base_parameters_untouched(self, balanced):
        before = balanced.model_dump()
        run_sensitivity("reduce_emissions", balanced)
        assert balanced.model_dump() == before

    def test_non_finite_sweep_rejected(self, balanced):
        with pytest.raises(ValidationError):
            run_sensitivity(
                "reduce_emissions", balanced,
                sweeps=[("Solar adoption", "solar_energy_adoption", -20.0, math.inf)],
                include_policy=False,
            )

    def test_overflowing_sweep_rejected(self):
        p = SimulationParameters(solar_energy_adoption=1e308)
        with pytest.raises(ValidationError):
            run_sensitivity(
                "reduce_emissions", p,
                sweeps=[("Solar adoption", "solar_energy_adoption", -1.0, 1e308)],
            )
