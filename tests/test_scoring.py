"""Tests for engine/scoring.py — hand-calculated composite scores."""

from __future__ import annotations

import pytest

from synergy_sim.engine.scoring import (
    clamp,
    feasibility_score,
    global_impact_score,
    round_half_up,
    round_score,
    sustainability_score,
)


# ═══════════════════════════════════════════════════════════════════════════
# Rounding
# ═══════════════════════════════════════════════════════════════════════════

class TestRounding:

    def test_half_rounds_up_not_to_even(self):
        # Python's round() would give 0 and 2
        assert round_score(0.5) == 1
        assert round_score(2.5) == 3

    def test_negative_half_rounds_toward_positive(self):
        assert round_score(-2.5) == -2

    def test_one_decimal(self):
        assert round_half_up(1.953125, 1) == 2.0
        assert round_half_up(138.94, 1) == 138.9
        assert round_half_up(0.25, 1) == 0.3

    def test_clamp(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-5, 0, 10) == 0
        assert clamp(50, 0, 10) == 10


# ═══════════════════════════════════════════════════════════════════════════
# Feasibility
# ═══════════════════════════════════════════════════════════════════════════

class TestFeasibility:

    def test_balanced_moderate(self):
        # 80 + 0 (moderate) + 10 (|50−40| < 20)
        assert feasibility_score(50, 40, "moderate") == 90

    def test_boundary_imbalance_gets_no_bonus(self):
        # |65−45| = 20 is not < 20
        assert feasibility_score(65, 45, "moderate") == 80

    def test_over_80_penalty_per_technology(self):
        # 80 − 0.5×10 − 0.5×10 + 0 + 10 (balanced)
        assert feasibility_score(90, 90, "moderate") == 80

    def test_policy_adjustments(self):
        base = dict(solar=60, wind=0)
        assert feasibility_score(**base, policy_strength="low") == 85
        assert feasibility_score(**base, policy_strength="moderate") == 80
        assert feasibility_score(**base, policy_strength="high") == 70
        assert feasibility_score(**base, policy_strength="maximum") == 60

    def test_challenge_bonus(self):
        assert feasibility_score(60, 0, "moderate", challenge_bonus=5) == 85

    def test_clamped_to_bounds(self):
        assert feasibility_score(500, 0, "maximum") == 20
        assert feasibility_score(0, 0, "low", challenge_bonus=50) == 100


# ═══════════════════════════════════════════════════════════════════════════
# Sustainability
# ═══════════════════════════════════════════════════════════════════════════

class TestSustainability:

    @pytest.mark.parametrize("temp, bonus", [(1.4, 30), (1.5, 30), (1.9, 20), (2.0, 20), (2.5, 10), (2.6, 0)])
    def test_temperature_tiers(self, temp, bonus):
        # 50 + (100/200)×40 = 70 before the tier
        assert sustainability_score(100, temp) == pytest.approx(70 + bonus)

    def test_low_action_penalty(self):
        # 50 + (40/200)×40 − 15, no tier at 2.6
        assert sustainability_score(40, 2.6) == pytest.approx(43)

    def test_overreach_penalty(self):
        # 50 + (190/200)×40 + 0 − 10
        assert sustainability_score(190, 2.6) == pytest.approx(78)

    def test_ceiling(self):
        # 50 + 38 + 30 − 10 = 108
        assert sustainability_score(190, 1.5) == 100

    def test_floor(self):
        assert sustainability_score(-500, 3.0) == 10


# ═══════════════════════════════════════════════════════════════════════════
# Global impact
# ═══════════════════════════════════════════════════════════════════════════

class TestGlobalImpact:

    def test_hand_calculated(self):
        # 40 + (65/65)×35 + 20 (≤1.5) + (80/100)×15 = 107 → 100
        assert global_impact_score(65, 1.5, 80) == 100
        # 40 + (13/65)×35 + 0 + (60/100)×15 = 40 + 7 + 9
        assert global_impact_score(13, 2.3, 60) == pytest.approx(56)

    def test_two_degree_tier(self):
        assert global_impact_score(0, 2.0, 0) == pytest.approx(50)

    def test_floor(self):
        assert global_impact_score(-100, 3.0, 0) == 15
