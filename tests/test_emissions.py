"""Tests for engine/emissions.py — the reduce_emissions model.

Expected values are hand-calculated from the default constants.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from synergy_sim.config import EmissionsModelConfig, SimulationParameters
from synergy_sim.engine.emissions import (
    co2_reduction_pct,
    dynamic_technology_cost,
    projected_temperature,
    simulate_emission_reduction,
)


# ═══════════════════════════════════════════════════════════════════════════
# Building blocks
# ═══════════════════════════════════════════════════════════════════════════

class TestCO2Reduction:

    def test_balanced_moderate(self):
        # (110/200)^0.9 × 75 = 43.79, + 2.4 policy, + (45/65)×5 = 3.46
        assert co2_reduction_pct(65, 45, 1.2) == pytest.approx(49.653, abs=0.01)

    def test_floor_with_no_adoption(self):
        assert co2_reduction_pct(0, 0, 1.0) == 2.0

    def test_capped_at_max_theoretical(self):
        assert co2_reduction_pct(100, 100, 2.0) <= 75.0

    def test_grid_penalty_above_threshold(self):
        # Same policy, balanced: 140 has no penalty, 200 does
        at_140 = co2_reduction_pct(70, 70, 1.0)
        at_200 = co2_reduction_pct(100, 100, 1.0)
        # contribution alone would add (1.0 − 0.7^0.9) × 75 ≈ 20.4
        no_penalty_gain = 75 * (1.0 - 0.7 ** 0.9)
        assert at_200 - at_140 == pytest.approx(no_penalty_gain - 8.0, abs=0.01)

    def test_diversity_bonus_rewards_balance(self):
        balanced = co2_reduction_pct(50, 50, 1.0)
        lopsided = co2_reduction_pct(100, 0, 1.0)
        assert balanced - lopsided == pytest.approx(5.0)

    def test_negative_adoption_treated_as_zero(self):
        assert co2_reduction_pct(-40, -40, 1.0) == co2_reduction_pct(0, 0, 1.0)


class TestTemperature:

    def test_baseline_minus_avoided(self):
        # 2.4 − 45 × 0.4 × 0.02
        assert projected_temperature(40.0) == pytest.approx(2.04)

    def test_feedback_above_50(self):
        # 2.4 − 45 × 0.6 × 0.02 × 1.1
        assert projected_temperature(60.0) == pytest.approx(1.806)

    def test_floor(self):
        cfg = EmissionsModelConfig(co2_to_temp_factor=1.0)
        assert projected_temperature(75.0, cfg) == 1.2


class TestTechnologyCost:

    def test_zero_adoption_costs_nothing(self):
        assert dynamic_technology_cost(0, 50) == 0.0

    def test_scale_discount(self):
        # 36/180 = 0.2 discount
        assert dynamic_technology_cost(36, 50) == pytest.approx(50 * 36 * 0.8)

    def test_discount_capped(self):
        assert dynamic_technology_cost(60, 40) == pytest.approx(40 * 60 * 0.75)

    def test_supply_pressure_above_70(self):
        # 0.3^1.2 × 0.5 ≈ 0.1179 pressure at 100
        expected = 50 * 100 * (1 - 0.25 + 0.3 ** 1.2 * 0.5)
        assert dynamic_technology_cost(100, 50) == pytest.approx(expected)

    def test_negative_adoption_costs_nothing(self):
        assert dynamic_technology_cost(-30, 50) == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Full model
# ═══════════════════════════════════════════════════════════════════════════

class TestBalancedScenario:
    """65% solar / 45% wind, moderate policy."""

    def test_co2_in_upper_middle(self, balanced):
        o = simulate_emission_reduction(balanced)
        assert o.co2_reduction == 49.7
        assert 45 <= o.co2_reduction <= 60

    def test_temperature_below_baseline(self, balanced):
        o = simulate_emission_reduction(balanced)
        # 2.4 − 45 × 0.4965 × 0.02 = 1.953
        assert o.temperature_change == 2.0
        assert o.temperature_change < 2.4

    def test_economics(self, balanced):
        o = simulate_emission_reduction(balanced)
        # solar 2437.5 + wind 1350 + grid 448.47 + policy 227.25
        assert o.economic_impact == pytest.approx(4463.2, abs=0.1)
        # (49.65×85 + 110×18) / 4463.2
        assert o.roi == pytest.approx(138.9, abs=0.1)

    def test_scores(self, balanced):
        o = simulate_emission_reduction(balanced)
        assert o.feasibility_score == 80
        # 50 + 22 + 20
        assert o.sustainability_score == 92
        # 40 + 26.74 + 10 + 12
        assert o.global_impact_score == 89


class TestSolarOnlyMaxPolicy:
    """100% solar / 0% wind, maximum policy."""

    def test_feasibility_penalized(self, solar_only_max_policy):
        o = simulate_emission_reduction(solar_only_max_policy)
        # 80 − 10 (solar over 80) − 20 (maximum), no balance bonus
        assert o.feasibility_score == 50

    def test_climate(self, solar_only_max_policy):
        o = simulate_emission_reduction(solar_only_max_policy)
        # 40.19 + 12 policy, no diversity
        assert o.co2_reduction == 52.2
        # feedback applies above 50%
        assert o.temperature_change == 1.9

    def test_policy_surcharge_in_cost(self, solar_only_max_policy):
        o = simulate_emission_reduction(solar_only_max_policy)
        solar = 50 * 100 * (1 - 0.25 + 0.3 ** 1.2 * 0.5)
        expected = solar + 400 + solar * 0.3 * 1.0
        assert o.economic_impact == pytest.approx(expected, abs=0.1)


class TestIdleScenario:
    """No adoption, low policy."""

    def test_co2_at_floor(self, idle):
        o = simulate_emission_reduction(idle)
        assert o.co2_reduction == 2.0

    def test_no_spend_no_roi(self, idle):
        o = simulate_emission_reduction(idle)
        assert o.economic_impact == 0.0
        assert o.roi == 0.0

    def test_sustainability_penalized(self, idle):
        o = simulate_emission_reduction(idle)
        # 50 + 0 + 10 (2.38 ≤ 2.5) − 15
        assert o.sustainability_score == 45

    def test_feasibility(self, idle):
        o = simulate_emission_reduction(idle)
        # 80 + 5 (low) + 10 (balanced)
        assert o.feasibility_score == 95


class TestInjectedConstants:

    def test_custom_config_changes_result(self, balanced):
        cfg = EmissionsModelConfig(min_reduction_pct=60.0)
        o = simulate_emission_reduction(balanced, cfg)
        assert o.co2_reduction == 60.0

    def test_config_is_frozen(self):
        cfg = EmissionsModelConfig()
        with pytest.raises(ValidationError):
            cfg.solar_cost_per_point = 1.0


class TestExtremeInputs:

    @pytest.mark.parametrize("solar, wind", [(-50, 250), (1_000, 1_000), (-1e6, -1e6), (1e12, 0)])
    def test_outputs_stay_in_bounds(self, solar, wind):
        p = SimulationParameters(solar_energy_adoption=solar, wind_energy_adoption=wind, policy_strength="maximum")
        o = simulate_emission_reduction(p)
        assert 2.0 <= o.co2_reduction <= 75.0
        assert o.temperature_change >= 1.2
        assert o.economic_impact >= 0
        assert o.roi >= -10
        assert 20 <= o.feasibility_score <= 100
        assert 10 <= o.sustainability_score <= 100
        assert 15 <= o.global_impact_score <= 100
