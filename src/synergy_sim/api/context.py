"""Context manifest generator — makes the simulator self-describing.

Produces structured context at two detail levels:
  - ``compact``: parameter schema + output descriptions
  - ``full``:    adds the model overview, key formulas, interpretation guide

A client reads ``GET /context?detail_level=full`` once, then knows what it
can configure, what each endpoint does, and how to read the outputs.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from synergy_sim.config.parameters import CHALLENGES, SimulationParameters


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class OutputFieldInfo(BaseModel):
    """One output field, machine-readable."""
    name: str
    type: str
    description: str
    unit: str = ""


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str
    request_body: str = ""
    response: str = ""


class SimulatorContext(BaseModel):
    """Full self-describing context."""
    simulator_name: str
    version: str
    description: str
    challenges: list[str]
    model_overview: str
    key_formulas: list[dict[str, str]]
    parameters: list[ParameterInfo]
    key_outputs: list[OutputFieldInfo]
    endpoints: list[EndpointInfo]
    interpretation_guide: str


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class, keyed by JSON alias."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt", "allow_inf_nan"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        default = field_info.default
        default_val = default if default is not None and not callable(default) else None

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=field_info.alias or name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Static content
# ═══════════════════════════════════════════════════════════════════════════

_MODEL_OVERVIEW = """
Synergy Sphere Climate Simulation Engine

WHAT IT DOES:
Maps a handful of policy levers to projected climate and economic outcomes.
It is a deterministic scoring model, not a physical climate model: the same
inputs always give the same outputs, so a shared solution shows identical
numbers on every view.

CHALLENGES:
  - reduce_emissions: solar + wind build-out replaces fossil generation.
    Diminishing returns on adoption, a policy bonus, a bonus for a balanced
    mix, and a grid-saturation penalty above 140 combined points.
  - reforestation: the two sliders are read as forest coverage. Young and
    mature sequestration, albedo and ecosystem cooling, land/planting/
    maintenance costs, carbon-credit/ecosystem/timber benefits.
  - any other identifier runs reduce_emissions.

INPUT HANDLING:
Adoption values are nominally 0–100 but are not rejected outside that range;
every derived quantity is clamped instead.
"""

_KEY_FORMULAS = [
    {
        "name": "CO2 reduction (reduce_emissions)",
        "formula": "clamp((T/200)^0.9 × 75 + (m−1)×12 + min(s,w)/max(s,w,1)×5 − grid_penalty, 2, 75)",
        "meaning": "T = solar + wind, m = policy multiplier (1.0/1.2/1.5/2.0)",
    },
    {
        "name": "Temperature (reduce_emissions)",
        "formula": "max(1.2, 2.4 − 45 × co2/100 × 0.02 × feedback)",
        "meaning": "feedback = 1.1 when co2 > 50, else 1.0",
    },
    {
        "name": "Technology cost",
        "formula": "base × adoption × (1 − min(0.25, a/180) + supply_pressure)",
        "meaning": "Economies of scale up to 25%; supply pressure above 70% adoption",
    },
    {
        "name": "ROI",
        "formula": "max(floor, benefits / total_cost × 100)",
        "meaning": "Floor is −10% for emissions, −5% for reforestation; 0 when nothing is spent",
    },
    {
        "name": "Synergy score",
        "formula": "round(0.3×efficiency + 0.3×sustainability + 0.2×feasibility + 0.2×global_impact)",
        "meaning": "efficiency = max(0, 100 − |temperatureChange| × 20). Recomputable from outcomes alone.",
    },
]

_KEY_OUTPUTS = [
    OutputFieldInfo(name="temperatureChange", type="float", description="Projected warming by the reference year", unit="°C"),
    OutputFieldInfo(name="co2Reduction", type="float", description="Reduction vs. global baseline emissions", unit="%"),
    OutputFieldInfo(name="economicImpact", type="float", description="Total cost of the plan", unit="billion USD"),
    OutputFieldInfo(name="roi", type="float", description="Return on investment", unit="%"),
    OutputFieldInfo(name="feasibilityScore", type="int", description="How achievable the plan is (20–100)"),
    OutputFieldInfo(name="sustainabilityScore", type="int", description="Long-term sustainability (10–100)"),
    OutputFieldInfo(name="globalImpactScore", type="int", description="Global reach of the plan (15–100)"),
    OutputFieldInfo(name="synergy_score", type="int", description="Weighted blend of outcomes (0–100)"),
    OutputFieldInfo(name="parameter_synergy", type="int", description="Input-only lever complementarity (20–100)"),
]

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest.", response="SimulatorContext"),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema for simulation parameters.", response="JSON Schema object"),
    EndpointInfo(method="GET", path="/parameters/defaults", description="Default parameters as JSON.", response="SimulationParameters JSON"),
    EndpointInfo(
        method="POST", path="/simulate",
        description="Run one simulation and return outcomes plus synergy, benchmark and suggestions.",
        request_body="{challenge, parameters}", response="SimulationResult",
    ),
    EndpointInfo(
        method="POST", path="/simulate/compare",
        description="Run several candidate solutions and rank them by synergy score.",
        request_body="{candidates: [{label, challenge, parameters}]}", response="Results + ranking + comparison narrative",
    ),
    EndpointInfo(
        method="POST", path="/simulate/sensitivity",
        description="Sweep each lever and report synergy swing (tornado chart data).",
        request_body="{challenge, parameters, sweep_params?}", response="Tornado bars sorted by swing",
    ),
    EndpointInfo(
        method="POST", path="/simulate/optimize",
        description="Grid-search the solar/wind mix that maximizes synergy for a policy strength.",
        request_body="{challenge, policy_strength, step, min_adoption, max_adoption}", response="MixSearchResult",
    ),
    EndpointInfo(
        method="POST", path="/simulate/narrative",
        description="Run one simulation and return a plain-English report.",
        request_body="{challenge, parameters}", response="Narrative + headline metrics",
    ),
    EndpointInfo(
        method="POST", path="/synergy",
        description="Recompute the synergy score from a stored outcomes object.",
        request_body="SimulationOutcomes", response="{synergy_score}",
    ),
]

_INTERPRETATION_GUIDE = """
HOW TO INTERPRET RESULTS:

1. TEMPERATURE:
   ≤1.5°C meets the Paris 1.5°C goal, ≤2.0°C the 2°C goal. Both tiers feed
   the sustainability and global impact scores.

2. FEASIBILITY:
   Starts at 80. Loses half a point per adoption point above 80 on either
   technology, gains 10 for a balanced mix (|solar − wind| < 20), and moves
   with policy strength (+5 low, 0 moderate, −10 high, −20 maximum).

3. ROI:
   Benefits over cost. Poor plans bottom out at a small negative floor.

4. SYNERGY SCORE:
   The headline number used for ranking shared solutions.
   <60 needs rebalancing, 60–79 is solid, ≥80 is excellent.

COMMON ANALYSIS PATTERNS:
  - "Which lever matters most?" → /simulate/sensitivity
  - "What is the best mix under high policy?" → /simulate/optimize
  - "Compare my saved solutions" → /simulate/compare
"""


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> SimulatorContext:
    """Build the self-describing context manifest."""
    full = detail_level == "full"
    return SimulatorContext(
        simulator_name="Synergy Sphere Climate Simulator",
        version="1.0",
        description=(
            "Deterministic climate-policy simulator: adjust solar and wind adoption and "
            "policy strength, get projected warming, CO2 reduction, cost, ROI and "
            "composite scores."
        ),
        challenges=list(CHALLENGES),
        model_overview=_MODEL_OVERVIEW.strip() if full else "",
        key_formulas=_KEY_FORMULAS if full else [],
        parameters=_extract_params(SimulationParameters),
        key_outputs=_KEY_OUTPUTS,
        endpoints=_ENDPOINTS,
        interpretation_guide=_INTERPRETATION_GUIDE.strip() if full else "",
    )


def get_parameters_schema() -> dict:
    """Return the JSON Schema for SimulationParameters (camelCase keys)."""
    return SimulationParameters.model_json_schema(by_alias=True)


def get_default_parameters() -> dict:
    """Return default SimulationParameters as a JSON-serializable dict."""
    return SimulationParameters().model_dump(by_alias=True)
