"""Sensitivity / tornado analysis on the synergy score.

One-at-a-time sweeps: nudge one lever down and up, re-run the model, and
record how far the synergy score moves.

Default sweep set:
  - solar adoption ± 20 points
  - wind adoption  ± 20 points
  - policy strength one step down / up the ordinal scale
"""

from __future__ import annotations

from dataclasses import dataclass, field

from synergy_sim.config.parameters import POLICY_LEVELS, SimulationParameters
from synergy_sim.engine.orchestrator import run_simulation
from synergy_sim.engine.synergy import compute_synergy_score


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Attribute on SimulationParameters (e.g. 'solar_energy_adoption')."""

    base_value: float | str
    low_value: float | str
    high_value: float | str

    synergy_at_low: int
    synergy_at_high: int

    delta_synergy: int
    """abs(synergy_at_high − synergy_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    challenge: str
    base_synergy: int

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_synergy (descending)."""


# (name, attribute, low_delta, high_delta) — deltas in adoption points
DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Solar adoption", "solar_energy_adoption", -20.0, 20.0),
    ("Wind adoption", "wind_energy_adoption", -20.0, 20.0),
]

POLICY_SWEEP_NAME = "Policy strength"


def _synergy(challenge: str, parameters: SimulationParameters) -> int:
    return compute_synergy_score(run_simulation(challenge, parameters))


def _with_value(parameters: SimulationParameters, path: str, value: float | str) -> SimulationParameters:
    """Copy of *parameters* with one field replaced, re-validated.

    Raises ``pydantic.ValidationError`` if the swept value is not finite.
    """
    return SimulationParameters.model_validate({**parameters.model_dump(), path: value})


def _policy_neighbours(strength: str) -> tuple[str, str]:
    """One step down and up the policy scale, pinned at the ends."""
    i = POLICY_LEVELS.index(strength)
    return POLICY_LEVELS[max(i - 1, 0)], POLICY_LEVELS[min(i + 1, len(POLICY_LEVELS) - 1)]


def run_sensitivity(
    challenge: str,
    parameters: SimulationParameters,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    include_policy: bool = True,
) -> SensitivityResult:
    """Run sensitivity analysis for one parameter set.

    Parameters
    ----------
    challenge : str
        Challenge identifier (unknown values fall back like ``run_simulation``).
    parameters : SimulationParameters
        Base parameters.
    sweeps : list[tuple[name, attribute, low_delta, high_delta]] | None
        Numeric sweeps in absolute adoption points. None = DEFAULT_SWEEPS.
    include_policy : bool
        Also sweep policy strength one level each way.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by synergy swing.

    Raises
    ------
    pydantic.ValidationError
        A swept value is not finite (e.g. an infinite delta).
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_synergy = _synergy(challenge, parameters)
    bars: list[TornadoBar] = []

    for name, path, low_delta, high_delta in sweeps:
        base_val = float(getattr(parameters, path))
        low_val = base_val + low_delta
        high_val = base_val + high_delta

        synergy_low = _synergy(challenge, _with_value(parameters, path, low_val))
        synergy_high = _synergy(challenge, _with_value(parameters, path, high_val))

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            synergy_at_low=synergy_low,
            synergy_at_high=synergy_high,
            delta_synergy=abs(synergy_high - synergy_low),
        ))

    if include_policy:
        low_policy, high_policy = _policy_neighbours(parameters.policy_strength)
        synergy_low = _synergy(challenge, _with_value(parameters, "policy_strength", low_policy))
        synergy_high = _synergy(challenge, _with_value(parameters, "policy_strength", high_policy))
        bars.append(TornadoBar(
            param_name=POLICY_SWEEP_NAME,
            param_path="policy_strength",
            base_value=parameters.policy_strength,
            low_value=low_policy,
            high_value=high_policy,
            synergy_at_low=synergy_low,
            synergy_at_high=synergy_high,
            delta_synergy=abs(synergy_high - synergy_low),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta_synergy, reverse=True)

    return SensitivityResult(challenge=challenge, base_synergy=base_synergy, bars=bars)
