"""Composite scores shared by every challenge model.

Three 0–100 heuristics:

  feasibility    = 80 − 0.5·excess(solar>80) − 0.5·excess(wind>80)
                   + policy adjustment + balance bonus (+ challenge bonus)
  sustainability = 50 + 40·(total/200) + temperature tier
                   − 15 if total<50 − 10 if total>180
  global impact  = 40 + 35·(co2/65) + temperature tier + 15·(feasibility/100)

Each is clamped to its own bounds before rounding.
"""

from __future__ import annotations

import math

from synergy_sim.config.constants import (
    DEFAULT_POLICY_TABLE,
    DEFAULT_SCORING_CONFIG,
    PolicyTable,
    ScoringConfig,
)
from synergy_sim.config.parameters import PolicyStrength


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties away from −∞ (2.25 → 2.3, 0.5 → 1).

    Python's ``round`` is banker's rounding; outcomes are rounded the way
    the web client has always displayed them.
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round_score(value: float) -> int:
    return int(round_half_up(value))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _tier_bonus(temperature_change: float, tiers: tuple[tuple[float, float], ...]) -> float:
    """First matching ``(max_temperature, bonus)`` tier, else 0."""
    for limit, bonus in tiers:
        if temperature_change <= limit:
            return bonus
    return 0.0


def feasibility_score(
    solar: float,
    wind: float,
    policy_strength: PolicyStrength,
    challenge_bonus: float = 0.0,
    policy: PolicyTable = DEFAULT_POLICY_TABLE,
    cfg: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """How achievable the plan is, unrounded, in [20, 100]."""
    score = cfg.feasibility_base

    # Very high single-technology adoption is harder to deliver
    if solar > cfg.feasibility_adoption_threshold:
        score -= (solar - cfg.feasibility_adoption_threshold) * cfg.feasibility_adoption_penalty
    if wind > cfg.feasibility_adoption_threshold:
        score -= (wind - cfg.feasibility_adoption_threshold) * cfg.feasibility_adoption_penalty

    score += policy.feasibility(policy_strength)

    if abs(solar - wind) < cfg.feasibility_balance_threshold:
        score += cfg.feasibility_balance_bonus

    score += challenge_bonus

    return clamp(score, *cfg.feasibility_bounds)


def sustainability_score(
    total_adoption: float,
    temperature_change: float,
    cfg: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Long-term sustainability, unrounded, in [10, 100]."""
    score = cfg.sustainability_base
    score += (total_adoption / cfg.adoption_ceiling_pct) * cfg.sustainability_adoption_weight
    score += _tier_bonus(temperature_change, cfg.sustainability_temperature_tiers)

    if total_adoption < cfg.sustainability_low_action_threshold:
        score -= cfg.sustainability_low_action_penalty
    if total_adoption > cfg.sustainability_overreach_threshold:
        score -= cfg.sustainability_overreach_penalty

    return clamp(score, *cfg.sustainability_bounds)


def global_impact_score(
    co2_reduction: float,
    temperature_change: float,
    feasibility: float,
    cfg: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Global reach of the plan, unrounded, in [15, 100]."""
    score = cfg.global_impact_base
    score += (co2_reduction / cfg.global_impact_reduction_reference) * cfg.global_impact_reduction_weight
    score += _tier_bonus(temperature_change, cfg.global_impact_temperature_tiers)
    score += (feasibility / 100.0) * cfg.global_impact_feasibility_weight

    return clamp(score, *cfg.global_impact_bounds)
