"""``reforestation`` challenge — the two sliders become forest coverage.

  coverage C  = solar + wind   (clamped to [0, max_effective_coverage_pct])
  young       = (C/200) × 15 × effectiveness
  mature      = (C/200) × 25 × multiplier^1.2
  co2         = min(45, young + 0.8 × mature)

Temperature subtracts direct cooling (sequestered Gt × the same factor as
the emissions model), albedo (linear up to full coverage) and an
ecosystem term past 120.  Costs are land + planting +
policy-scaled maintenance; benefits are carbon credits, ecosystem services
and timber once coverage passes 80.
"""

from __future__ import annotations

from synergy_sim.config.constants import (
    DEFAULT_POLICY_TABLE,
    DEFAULT_REFORESTATION_CONFIG,
    DEFAULT_SCORING_CONFIG,
    PolicyTable,
    ReforestationModelConfig,
    ScoringConfig,
)
from synergy_sim.config.parameters import SimulationParameters
from synergy_sim.engine.scoring import (
    clamp,
    feasibility_score,
    global_impact_score,
    round_half_up,
    round_score,
    sustainability_score,
)
from synergy_sim.models.results import SimulationOutcomes


def sequestration_pct(
    coverage: float,
    policy_multiplier: float,
    cfg: ReforestationModelConfig = DEFAULT_REFORESTATION_CONFIG,
) -> float:
    """Unrounded CO2 reduction (%) from *coverage*, in [0, max_reduction_pct]."""
    share = coverage / cfg.coverage_ceiling_pct
    young = share * cfg.young_sequestration_pct * cfg.forest_effectiveness
    mature = share * cfg.mature_sequestration_pct * policy_multiplier ** cfg.mature_policy_exponent
    return clamp(young + mature * cfg.mature_dampening, 0.0, cfg.max_reduction_pct)


def forest_temperature(
    coverage: float,
    co2_reduction: float,
    cfg: ReforestationModelConfig = DEFAULT_REFORESTATION_CONFIG,
) -> float:
    """Warming (°C) with direct, albedo and ecosystem cooling."""
    sequestered_gt = cfg.global_emissions_baseline_gt * (co2_reduction / 100.0)
    direct_cooling = sequestered_gt * cfg.co2_to_temp_factor

    if coverage > cfg.albedo_full_coverage_pct:
        albedo = cfg.albedo_cooling_c
    else:
        albedo = (coverage / cfg.albedo_full_coverage_pct) * cfg.albedo_cooling_c

    ecosystem = cfg.ecosystem_cooling_c if coverage > cfg.ecosystem_threshold_pct else 0.0

    return max(
        cfg.min_temperature_c,
        cfg.baseline_temperature_c - direct_cooling - albedo - ecosystem,
    )


def simulate_reforestation(
    parameters: SimulationParameters,
    cfg: ReforestationModelConfig = DEFAULT_REFORESTATION_CONFIG,
    policy: PolicyTable = DEFAULT_POLICY_TABLE,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> SimulationOutcomes:
    """Run the ``reforestation`` model for one parameter set."""
    solar = parameters.solar_energy_adoption
    wind = parameters.wind_energy_adoption
    total = parameters.total_adoption
    multiplier = policy.multiplier(parameters.policy_strength)
    coverage = clamp(total, 0.0, cfg.max_effective_coverage_pct)

    # ── Climate ────────────────────────────────────────────────────────
    co2_reduction = sequestration_pct(coverage, multiplier, cfg)
    temperature_change = forest_temperature(coverage, co2_reduction, cfg)

    # ── Costs ──────────────────────────────────────────────────────────
    land_cost = coverage * cfg.land_cost_per_point
    planting_cost = coverage * cfg.planting_cost_per_point
    maintenance_cost = coverage * cfg.maintenance_cost_per_point * multiplier
    economic_impact = land_cost + planting_cost + maintenance_cost

    # ── Returns ────────────────────────────────────────────────────────
    carbon_credits = co2_reduction * cfg.carbon_credit_per_reduction_pct
    ecosystem_services = coverage * cfg.ecosystem_services_per_point
    timber = coverage * cfg.timber_revenue_per_point if coverage > cfg.timber_threshold_pct else 0.0
    total_benefits = carbon_credits + ecosystem_services + timber
    if economic_impact > 0:
        roi = max(cfg.min_roi_pct, total_benefits / economic_impact * 100.0)
    else:
        roi = 0.0

    # ── Scores ─────────────────────────────────────────────────────────
    feasibility = feasibility_score(
        solar, wind, parameters.policy_strength,
        challenge_bonus=cfg.feasibility_bonus, policy=policy, cfg=scoring,
    )
    sustainability = min(
        scoring.sustainability_bounds[1],
        sustainability_score(total, temperature_change, scoring) + cfg.sustainability_bonus,
    )
    global_impact = global_impact_score(co2_reduction, temperature_change, feasibility, scoring)

    return SimulationOutcomes(
        temperature_change=round_half_up(temperature_change, 1),
        co2_reduction=round_half_up(co2_reduction, 1),
        economic_impact=round_half_up(economic_impact, 1),
        roi=round_half_up(roi, 1),
        feasibility_score=round_score(feasibility),
        sustainability_score=round_score(sustainability),
        global_impact_score=round_score(global_impact),
    )
