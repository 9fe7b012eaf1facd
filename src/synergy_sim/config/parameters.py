"""Simulation inputs — the policy levers a player adjusts before a run."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


PolicyStrength = Literal["low", "moderate", "high", "maximum"]
"""Ordinal strength of regulatory intervention."""

ChallengeId = Literal["reduce_emissions", "reforestation"]
"""Challenges with a dedicated model.  Anything else falls back to reduce_emissions."""

POLICY_LEVELS: tuple[PolicyStrength, ...] = ("low", "moderate", "high", "maximum")
CHALLENGES: tuple[ChallengeId, ...] = ("reduce_emissions", "reforestation")
DEFAULT_CHALLENGE: ChallengeId = "reduce_emissions"


class SimulationParameters(BaseModel):
    """One set of player inputs, fixed per simulation run.

    Adoption values are *expected* in [0, 100] but are deliberately not
    range-validated: the engine clamps every derived quantity instead, so
    an unvalidated slider value can never crash a run.  Only finiteness
    is enforced.

    JSON keys are camelCase (``solarEnergyAdoption``); Python attributes are
    snake_case.  Unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    solar_energy_adoption: float = Field(
        default=50.0, allow_inf_nan=False,
        description="Share of solar adoption (%). Nominal range 0–100.",
    )
    wind_energy_adoption: float = Field(
        default=50.0, allow_inf_nan=False,
        description="Share of wind adoption (%). Nominal range 0–100.",
    )
    policy_strength: PolicyStrength = Field(
        default="moderate",
        description="Regulatory intervention: 'low', 'moderate', 'high' or 'maximum'.",
    )

    # Accepted for forward compatibility; no current model reads them.
    carbon_tax: float | None = Field(
        default=None, allow_inf_nan=False,
        description="Carbon tax ($/tCO2). Accepted but unused by current models.",
    )
    reforestation_area: float | None = Field(
        default=None, allow_inf_nan=False,
        description="Reforestation area. Accepted but unused by current models.",
    )

    @property
    def total_adoption(self) -> float:
        """Combined solar + wind adoption (may exceed 100, max nominal 200)."""
        return self.solar_energy_adoption + self.wind_energy_adoption
