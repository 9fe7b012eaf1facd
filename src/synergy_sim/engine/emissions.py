"""``reduce_emissions`` challenge — renewable build-out vs. fossil baseline.

Pipeline:
  adoption → CO2 reduction (diminishing returns + policy + diversity − grid saturation)
           → temperature (baseline − avoided warming × feedback)
           → cost (per-technology market dynamics + grid + policy surcharge)
           → ROI → composite scores

Adoption is clamped to [0, max_effective_adoption_pct] wherever it feeds a
fractional power or a cost; the scores still see the raw slider values.
"""

from __future__ import annotations

from synergy_sim.config.constants import (
    DEFAULT_EMISSIONS_CONFIG,
    DEFAULT_POLICY_TABLE,
    DEFAULT_SCORING_CONFIG,
    EmissionsModelConfig,
    PolicyTable,
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


def dynamic_technology_cost(
    adoption: float,
    cost_per_point: float,
    cfg: EmissionsModelConfig = DEFAULT_EMISSIONS_CONFIG,
) -> float:
    """Cost of one technology at *adoption* % with market dynamics.

    Economies of scale give up to ``scale_discount_cap`` off; past the
    supply threshold a super-linear pressure term pushes cost back up.
    """
    adoption = clamp(adoption, 0.0, cfg.max_effective_adoption_pct)
    scale_discount = min(cfg.scale_discount_cap, adoption / cfg.scale_discount_divisor)

    supply_pressure = 0.0
    if adoption > cfg.supply_pressure_threshold_pct:
        supply_pressure = (
            ((adoption - cfg.supply_pressure_threshold_pct) / 100.0) ** cfg.supply_pressure_exponent
            * cfg.supply_pressure_scale
        )

    return cost_per_point * adoption * (1.0 - scale_discount + supply_pressure)


def co2_reduction_pct(
    solar: float,
    wind: float,
    policy_multiplier: float,
    cfg: EmissionsModelConfig = DEFAULT_EMISSIONS_CONFIG,
) -> float:
    """Unrounded CO2 reduction (%), clamped to [min, max theoretical]."""
    solar = clamp(solar, 0.0, cfg.max_effective_adoption_pct)
    wind = clamp(wind, 0.0, cfg.max_effective_adoption_pct)
    total = solar + wind

    efficiency = (total / cfg.adoption_ceiling_pct) ** cfg.renewable_exponent
    contribution = efficiency * cfg.max_theoretical_reduction_pct

    policy_bonus = (policy_multiplier - 1.0) * cfg.policy_bonus_per_multiplier

    diversity_ratio = min(solar, wind) / max(solar, wind, 1.0)
    diversity_bonus = diversity_ratio * cfg.diversity_bonus_max_pct

    integration_penalty = 0.0
    if total > cfg.grid_integration_threshold_pct:
        integration_penalty = (
            ((total - cfg.grid_integration_threshold_pct) / cfg.grid_integration_span_pct)
            ** cfg.grid_integration_exponent
            * cfg.grid_integration_scale_pct
        )

    return clamp(
        contribution + policy_bonus + diversity_bonus - integration_penalty,
        cfg.min_reduction_pct,
        cfg.max_theoretical_reduction_pct,
    )


def projected_temperature(
    co2_reduction: float,
    cfg: EmissionsModelConfig = DEFAULT_EMISSIONS_CONFIG,
) -> float:
    """Warming (°C) after avoiding ``co2_reduction`` % of baseline emissions."""
    avoided_gt = cfg.global_emissions_baseline_gt * (co2_reduction / 100.0)
    avoided_warming = avoided_gt * cfg.co2_to_temp_factor

    feedback = cfg.feedback_factor if co2_reduction > cfg.feedback_threshold_pct else 1.0
    return max(cfg.min_temperature_c, cfg.baseline_temperature_c - avoided_warming * feedback)


def simulate_emission_reduction(
    parameters: SimulationParameters,
    cfg: EmissionsModelConfig = DEFAULT_EMISSIONS_CONFIG,
    policy: PolicyTable = DEFAULT_POLICY_TABLE,
    scoring: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> SimulationOutcomes:
    """Run the ``reduce_emissions`` model for one parameter set."""
    solar = parameters.solar_energy_adoption
    wind = parameters.wind_energy_adoption
    total = parameters.total_adoption
    multiplier = policy.multiplier(parameters.policy_strength)
    effective_total = (
        clamp(solar, 0.0, cfg.max_effective_adoption_pct)
        + clamp(wind, 0.0, cfg.max_effective_adoption_pct)
    )

    # ── Climate ────────────────────────────────────────────────────────
    co2_reduction = co2_reduction_pct(solar, wind, multiplier, cfg)
    temperature_change = projected_temperature(co2_reduction, cfg)

    # ── Costs ──────────────────────────────────────────────────────────
    solar_cost = dynamic_technology_cost(solar, cfg.solar_cost_per_point, cfg)
    wind_cost = dynamic_technology_cost(wind, cfg.wind_cost_per_point, cfg)
    infrastructure_cost = (
        (effective_total / 100.0) ** cfg.infrastructure_cost_exponent
        * cfg.infrastructure_cost_scale
    )
    policy_cost = (solar_cost + wind_cost) * cfg.policy_cost_multiplier * (multiplier - 1.0)
    total_cost = solar_cost + wind_cost + infrastructure_cost + policy_cost

    # ── Returns ────────────────────────────────────────────────────────
    avoided_climate_cost = co2_reduction * cfg.avoided_cost_per_reduction_pct
    economic_benefit = effective_total * cfg.economic_benefit_per_adoption_pct
    if total_cost > 0:
        roi = max(cfg.min_roi_pct, (avoided_climate_cost + economic_benefit) / total_cost * 100.0)
    else:
        roi = 0.0

    # ── Scores ─────────────────────────────────────────────────────────
    feasibility = feasibility_score(solar, wind, parameters.policy_strength, policy=policy, cfg=scoring)
    sustainability = sustainability_score(total, temperature_change, scoring)
    global_impact = global_impact_score(co2_reduction, temperature_change, feasibility, scoring)

    return SimulationOutcomes(
        temperature_change=round_half_up(temperature_change, 1),
        co2_reduction=round_half_up(co2_reduction, 1),
        economic_impact=round_half_up(total_cost, 1),
        roi=round_half_up(roi, 1),
        feasibility_score=round_score(feasibility),
        sustainability_score=round_score(sustainability),
        global_impact_score=round_score(global_impact),
    )
