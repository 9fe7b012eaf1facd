"""Result types — the contract between engine, API, and whatever persists runs.

``SimulationOutcomes`` is the shape downstream code stores verbatim inside a
shared solution, so its JSON keys are camelCase and stable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from synergy_sim.config.parameters import SimulationParameters


class SimulationOutcomes(BaseModel):
    """Projected outcomes for one run.

    Float fields are rounded half-up to one decimal; scores to integers.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    temperature_change: float
    """Projected warming by the reference year (°C). Never below the model floor."""

    co2_reduction: float
    """Reduction vs. global baseline emissions (%). In [0, challenge max]."""

    economic_impact: float
    """Total cost estimate (billion USD). Non-negative."""

    roi: float
    """Return on investment (%). May be negative down to the model floor."""

    # Same bounds the scoring helpers clamp to; a persisted object outside
    # them did not come from the engine and is rejected on re-scoring.
    feasibility_score: int = Field(ge=20, le=100)
    sustainability_score: int = Field(ge=10, le=100)
    global_impact_score: int = Field(ge=15, le=100)


class SimulationResult(BaseModel):
    """One run plus everything the UI derives from it."""

    challenge: str
    """Challenge identifier as requested."""
    resolved_challenge: str
    """Model that actually ran (differs from ``challenge`` on fallback)."""
    parameters: SimulationParameters
    outcomes: SimulationOutcomes

    synergy_score: int
    """Weighted blend of outcomes — recomputable from ``outcomes`` alone."""
    parameter_synergy: int
    """Input-only heuristic of how well the levers complement each other."""
    benchmark: str = ""
    synergy_tip: str = ""
    suggestions: list[str] = Field(default_factory=list)
