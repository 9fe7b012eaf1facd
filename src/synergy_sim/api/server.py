"""FastAPI server — HTTP surface for the Synergy Sphere simulator.

Run with:
    uvicorn synergy_sim.api.server:app --reload --port 8000

Or:
    synergy-sim-api

Endpoints:
    GET  /context              — self-describing manifest (model + schemas)
    GET  /schema               — JSON Schema for simulation parameters
    GET  /parameters/defaults  — default parameters as JSON
    POST /simulate             — run one simulation
    POST /simulate/compare     — run several candidates, rank by synergy
    POST /simulate/sensitivity — lever sweeps → tornado data
    POST /simulate/optimize    — best solar/wind mix for a policy strength
    POST /simulate/narrative   — run + plain-English interpretation
    POST /synergy              — re-score a stored outcomes object
"""

from __future__ import annotations

import logging
import os
from typing import Any, Literal

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from synergy_sim.api.context import build_context, get_default_parameters, get_parameters_schema
from synergy_sim.api.narrative import generate_comparison_narrative, generate_narrative
from synergy_sim.config.parameters import DEFAULT_CHALLENGE, PolicyStrength, SimulationParameters
from synergy_sim.engine.insights import default_description
from synergy_sim.engine.optimizer import MixSearchResult, find_best_mix
from synergy_sim.engine.orchestrator import run_full
from synergy_sim.engine.sensitivity import run_sensitivity
from synergy_sim.engine.synergy import compute_synergy_score
from synergy_sim.models.results import SimulationOutcomes, SimulationResult

logger = logging.getLogger(__name__)

# Sweep deltas in adoption points; base + delta must stay finite
MAX_SWEEP_DELTA = 1_000.0


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Synergy Sphere Climate Simulator API",
    version="1.0",
    description=(
        "Run the deterministic climate-policy simulation behind the Synergy Sphere "
        "world game. Adjust solar/wind adoption and policy strength, get projected "
        "outcomes and a synergy score. Start by calling GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. Missing parameters use defaults."""
    challenge: str = Field(
        default=DEFAULT_CHALLENGE,
        description="'reduce_emissions' or 'reforestation'. Anything else runs reduce_emissions.",
    )
    parameters: SimulationParameters = Field(
        default_factory=SimulationParameters,
        description="Example: {'solarEnergyAdoption': 65, 'windEnergyAdoption': 45, 'policyStrength': 'moderate'}",
    )


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: dict[str, Any]
    description: str


class CompareCandidate(BaseModel):
    """One solution in a comparison."""
    label: str = ""
    challenge: str = DEFAULT_CHALLENGE
    parameters: SimulationParameters = Field(default_factory=SimulationParameters)


class CompareRequest(BaseModel):
    """Request body for /simulate/compare."""
    candidates: list[CompareCandidate] = Field(
        default_factory=list,
        description="Solutions to rank. Example: [{'label': 'Solar push', 'parameters': {'solarEnergyAdoption': 90}}]",
    )


class CompareResponse(BaseModel):
    """Response from /simulate/compare."""
    results: list[dict[str, Any]]
    comparison_narrative: str
    ranking: list[dict[str, Any]]


class SweepParam(BaseModel):
    """One numeric sweep for /simulate/sensitivity."""
    name: str = ""
    path: Literal["solar_energy_adoption", "wind_energy_adoption"]
    low_delta: float = Field(default=-20.0, ge=-MAX_SWEEP_DELTA, le=MAX_SWEEP_DELTA, allow_inf_nan=False)
    high_delta: float = Field(default=20.0, ge=-MAX_SWEEP_DELTA, le=MAX_SWEEP_DELTA, allow_inf_nan=False)


class SensitivityRequest(BaseModel):
    """Request body for /simulate/sensitivity."""
    challenge: str = DEFAULT_CHALLENGE
    parameters: SimulationParameters = Field(default_factory=SimulationParameters)
    sweep_params: list[SweepParam] | None = Field(
        default=None,
        description="Optional override. Default sweeps solar and wind ±20 points.",
    )
    include_policy: bool = Field(default=True, description="Also sweep policy strength one level each way")


class OptimizeRequest(BaseModel):
    """Request body for /simulate/optimize."""
    challenge: str = DEFAULT_CHALLENGE
    policy_strength: PolicyStrength = "moderate"
    step: float = Field(default=10.0, ge=1.0, le=50.0, description="Grid spacing in adoption points")
    min_adoption: float = Field(default=0.0, ge=0.0, le=200.0)
    max_adoption: float = Field(default=100.0, ge=0.0, le=200.0)


class OptimizeResponse(BaseModel):
    """Response from /simulate/optimize."""
    search: dict[str, Any]
    result: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _dump_result(result: SimulationResult) -> dict[str, Any]:
    """Serialize with camelCase parameters/outcomes, as clients persist them."""
    return result.model_dump(by_alias=True)


def _ranking_row(label: str, result: SimulationResult) -> dict[str, Any]:
    o = result.outcomes
    return {
        "label": label,
        "challenge": result.resolved_challenge,
        "synergy_score": result.synergy_score,
        "co2_reduction": o.co2_reduction,
        "temperature_change": o.temperature_change,
        "economic_impact": o.economic_impact,
        "roi": o.roi,
    }


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Synergy Sphere Climate Simulator API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' for model overview + formulas + guide",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """JSON Schema for SimulationParameters — types, defaults, constraints."""
    return get_parameters_schema()


@app.get("/parameters/defaults")
def get_defaults():
    """Default SimulationParameters as JSON."""
    return get_default_parameters()


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run one simulation.

    Example request:
    ```json
    {"challenge": "reduce_emissions",
     "parameters": {"solarEnergyAdoption": 65, "windEnergyAdoption": 45, "policyStrength": "moderate"}}
    ```
    """
    result = run_full(req.challenge, req.parameters)
    return SimulateResponse(
        result=_dump_result(result),
        description=default_description(result.resolved_challenge, req.parameters),
    )


@app.post("/simulate/compare", response_model=CompareResponse)
def simulate_compare(req: CompareRequest):
    """Run several candidate solutions and rank them by synergy score."""
    labels: list[str] = []
    results: list[SimulationResult] = []
    for i, candidate in enumerate(req.candidates, 1):
        labels.append(candidate.label or f"Solution {i}")
        results.append(run_full(candidate.challenge, candidate.parameters))

    ranking = [_ranking_row(label, r) for label, r in zip(labels, results)]
    ranking.sort(key=lambda x: x["synergy_score"], reverse=True)

    return CompareResponse(
        results=[_dump_result(r) for r in results],
        comparison_narrative=generate_comparison_narrative(results, labels),
        ranking=ranking,
    )


@app.post("/simulate/sensitivity")
def simulate_sensitivity(req: SensitivityRequest):
    """Sweep each lever and return synergy swings, largest first."""
    sweeps = None
    if req.sweep_params:
        sweeps = [
            (sp.name or sp.path, sp.path, sp.low_delta, sp.high_delta)
            for sp in req.sweep_params
        ]

    sensitivity = run_sensitivity(req.challenge, req.parameters, sweeps, req.include_policy)

    return {
        "challenge": sensitivity.challenge,
        "base_synergy": sensitivity.base_synergy,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "synergy_at_low": bar.synergy_at_low,
                "synergy_at_high": bar.synergy_at_high,
                "delta_synergy": bar.delta_synergy,
            }
            for bar in sensitivity.bars
        ],
        "interpretation": (
            "Sorted by absolute synergy swing (largest first). "
            "Levers at the top of the list are the ones that matter most for this plan."
        ),
    }


@app.post("/simulate/optimize", response_model=OptimizeResponse)
def simulate_optimize(req: OptimizeRequest):
    """Find the solar/wind mix with the highest synergy score on a grid."""
    search: MixSearchResult = find_best_mix(
        challenge=req.challenge,
        policy_strength=req.policy_strength,
        step=req.step,
        min_adoption=min(req.min_adoption, req.max_adoption),
        max_adoption=max(req.min_adoption, req.max_adoption),
    )
    result = run_full(search.challenge, search.best_parameters)
    narrative = (
        f"Best mix under {req.policy_strength} policy after {search.evaluated} runs: "
        f"{search.best_parameters.solar_energy_adoption:g}% solar, "
        f"{search.best_parameters.wind_energy_adoption:g}% wind "
        f"(synergy {search.best_synergy_score}).\n\n"
        + generate_narrative(result)
    )
    return OptimizeResponse(
        search=search.model_dump(by_alias=True),
        result=_dump_result(result),
        narrative=narrative,
    )


@app.post("/simulate/narrative")
def simulate_with_narrative(req: SimulateRequest):
    """Run one simulation and return only the narrative plus headline metrics."""
    result = run_full(req.challenge, req.parameters)
    o = result.outcomes
    return {
        "narrative": generate_narrative(result),
        "headline_metrics": {
            "synergy_score": result.synergy_score,
            "temperature_change": o.temperature_change,
            "co2_reduction": o.co2_reduction,
            "economic_impact": o.economic_impact,
            "roi": o.roi,
            "benchmark": result.benchmark,
        },
    }


@app.post("/synergy")
def rescore(outcomes: SimulationOutcomes):
    """Recompute the synergy score from a persisted outcomes object."""
    return {"synergy_score": compute_synergy_score(outcomes)}


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server.

    ``SYNERGY_SIM_HOST`` / ``SYNERGY_SIM_PORT`` override the bind address.
    """
    import uvicorn

    host = os.environ.get("SYNERGY_SIM_HOST", "0.0.0.0")
    port = int(os.environ.get("SYNERGY_SIM_PORT", "8000"))
    logging.basicConfig(level=os.environ.get("SYNERGY_SIM_LOG_LEVEL", "INFO"))
    logger.info("Starting Synergy Sphere simulator API on %s:%d", host, port)
    uvicorn.run("synergy_sim.api.server:app", host=host, port=port)


if __name__ == "__main__":
    main()
