"""Model constant tables — read-only configuration for the challenge models.

Every table is a frozen Pydantic model.  The module-level ``DEFAULT_*``
instances are what the engine uses unless a caller injects an alternative,
so there is no process-wide mutable state.
"""

from pydantic import BaseModel, ConfigDict, Field

from synergy_sim.config.parameters import PolicyStrength


class _FrozenTable(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PolicyLevels(_FrozenTable):
    """One value per policy strength."""

    low: float
    moderate: float
    high: float
    maximum: float

    def __getitem__(self, strength: PolicyStrength) -> float:
        return getattr(self, strength)


class PolicyTable(_FrozenTable):
    """Policy-strength lookups shared by both models and the scoring helpers."""

    multipliers: PolicyLevels = Field(
        default=PolicyLevels(low=1.0, moderate=1.2, high=1.5, maximum=2.0),
        description="Effect multiplier per policy strength",
    )
    feasibility_adjustment: PolicyLevels = Field(
        default=PolicyLevels(low=5.0, moderate=0.0, high=-10.0, maximum=-20.0),
        description="Feasibility score points added per policy strength",
    )

    def multiplier(self, strength: PolicyStrength) -> float:
        return self.multipliers[strength]

    def feasibility(self, strength: PolicyStrength) -> float:
        return self.feasibility_adjustment[strength]


class EmissionsModelConfig(_FrozenTable):
    """Constants for the ``reduce_emissions`` challenge."""

    max_effective_adoption_pct: float = Field(
        default=1_000.0,
        description="Adoption above this is treated as this value inside the power and cost terms",
    )

    # --- CO2 reduction ---
    global_emissions_baseline_gt: float = Field(default=45.0, description="Global baseline emissions (GtCO2e/yr)")
    max_theoretical_reduction_pct: float = Field(default=75.0, description="Ceiling on CO2 reduction (%)")
    adoption_ceiling_pct: float = Field(default=200.0, description="Combined solar+wind normaliser")
    renewable_exponent: float = Field(default=0.9, description="Diminishing-returns exponent on adoption share")
    policy_bonus_per_multiplier: float = Field(default=12.0, description="Reduction points per unit of (multiplier − 1)")
    diversity_bonus_max_pct: float = Field(default=5.0, description="Bonus for a perfectly balanced solar/wind mix")
    grid_integration_threshold_pct: float = Field(default=140.0, description="Combined adoption where grid saturation starts")
    grid_integration_span_pct: float = Field(default=60.0, description="Normaliser for the saturation penalty")
    grid_integration_exponent: float = Field(default=1.5, description="Super-linear exponent of the saturation penalty")
    grid_integration_scale_pct: float = Field(default=8.0, description="Penalty points at one full span")
    min_reduction_pct: float = Field(default=2.0, description="Floor on CO2 reduction (%)")

    # --- Temperature ---
    baseline_temperature_c: float = Field(default=2.4, description="Current-trajectory warming (°C)")
    co2_to_temp_factor: float = Field(default=0.02, description="°C avoided per GtCO2e/yr avoided")
    feedback_threshold_pct: float = Field(default=50.0, description="Reduction above which feedback applies")
    feedback_factor: float = Field(default=1.1, description="Feedback multiplier on avoided warming")
    min_temperature_c: float = Field(default=1.2, description="Floor on projected warming (°C)")

    # --- Costs (billion USD) ---
    solar_cost_per_point: float = Field(default=50.0, description="Solar cost per adoption point")
    wind_cost_per_point: float = Field(default=40.0, description="Wind cost per adoption point")
    scale_discount_cap: float = Field(default=0.25, description="Max economies-of-scale discount")
    scale_discount_divisor: float = Field(default=180.0, description="Adoption giving the full discount")
    supply_pressure_threshold_pct: float = Field(default=70.0, description="Adoption where supply constraints start")
    supply_pressure_exponent: float = Field(default=1.2)
    supply_pressure_scale: float = Field(default=0.5)
    infrastructure_cost_scale: float = Field(default=400.0, description="Grid cost at 100 combined adoption points")
    infrastructure_cost_exponent: float = Field(default=1.2)
    policy_cost_multiplier: float = Field(default=0.3, description="Policy surcharge per unit of (multiplier − 1)")

    # --- Returns ---
    avoided_cost_per_reduction_pct: float = Field(default=85.0, description="Avoided climate damages per reduction point")
    economic_benefit_per_adoption_pct: float = Field(default=18.0, description="Jobs / energy security per adoption point")
    min_roi_pct: float = Field(default=-10.0, description="Floor on ROI (%)")


class ReforestationModelConfig(_FrozenTable):
    """Constants for the ``reforestation`` challenge.

    The two adoption sliders are read as forest-coverage percentages.
    """

    max_effective_coverage_pct: float = Field(default=1_000.0)

    # --- Sequestration ---
    coverage_ceiling_pct: float = Field(default=200.0)
    forest_effectiveness: float = Field(default=0.6, description="Young-forest effectiveness")
    young_sequestration_pct: float = Field(default=15.0, description="Young-forest reduction at full coverage")
    mature_sequestration_pct: float = Field(default=25.0, description="Mature-forest reduction at full coverage")
    mature_policy_exponent: float = Field(default=1.2, description="Exponent on the policy multiplier for compounding growth")
    mature_dampening: float = Field(default=0.8, description="Fixed dampening on the mature term")
    max_reduction_pct: float = Field(default=45.0, description="Ceiling on CO2 reduction (%)")

    # --- Temperature ---
    baseline_temperature_c: float = Field(default=2.3)
    global_emissions_baseline_gt: float = Field(default=45.0, description="Global baseline emissions (GtCO2e/yr)")
    co2_to_temp_factor: float = Field(default=0.02, description="°C avoided per GtCO2e/yr sequestered")
    albedo_full_coverage_pct: float = Field(default=100.0)
    albedo_cooling_c: float = Field(default=0.05)
    ecosystem_threshold_pct: float = Field(default=120.0)
    ecosystem_cooling_c: float = Field(default=0.02)
    min_temperature_c: float = Field(default=1.3)

    # --- Costs (billion USD) ---
    land_cost_per_point: float = Field(default=12.0)
    planting_cost_per_point: float = Field(default=6.0)
    maintenance_cost_per_point: float = Field(default=8.0, description="Scaled by the policy multiplier")

    # --- Returns ---
    carbon_credit_per_reduction_pct: float = Field(default=50.0)
    ecosystem_services_per_point: float = Field(default=28.0)
    timber_threshold_pct: float = Field(default=80.0)
    timber_revenue_per_point: float = Field(default=12.0)
    min_roi_pct: float = Field(default=-5.0)

    # --- Score adjustments ---
    sustainability_bonus: float = Field(default=15.0)
    feasibility_bonus: float = Field(default=5.0)


class ScoringConfig(_FrozenTable):
    """Composite-score heuristics shared by both models."""

    feasibility_base: float = 80.0
    feasibility_adoption_threshold: float = 80.0
    feasibility_adoption_penalty: float = 0.5
    feasibility_balance_threshold: float = 20.0
    feasibility_balance_bonus: float = 10.0
    feasibility_bounds: tuple[float, float] = (20.0, 100.0)

    sustainability_base: float = 50.0
    sustainability_adoption_weight: float = 40.0
    sustainability_temperature_tiers: tuple[tuple[float, float], ...] = ((1.5, 30.0), (2.0, 20.0), (2.5, 10.0))
    sustainability_low_action_threshold: float = 50.0
    sustainability_low_action_penalty: float = 15.0
    sustainability_overreach_threshold: float = 180.0
    sustainability_overreach_penalty: float = 10.0
    sustainability_bounds: tuple[float, float] = (10.0, 100.0)

    global_impact_base: float = 40.0
    global_impact_reduction_reference: float = 65.0
    global_impact_reduction_weight: float = 35.0
    global_impact_temperature_tiers: tuple[tuple[float, float], ...] = ((1.5, 20.0), (2.0, 10.0))
    global_impact_feasibility_weight: float = 15.0
    global_impact_bounds: tuple[float, float] = (15.0, 100.0)

    adoption_ceiling_pct: float = 200.0


DEFAULT_POLICY_TABLE = PolicyTable()
DEFAULT_EMISSIONS_CONFIG = EmissionsModelConfig()
DEFAULT_REFORESTATION_CONFIG = ReforestationModelConfig()
DEFAULT_SCORING_CONFIG = ScoringConfig()
