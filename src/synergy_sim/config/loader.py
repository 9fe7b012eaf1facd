"""YAML presets — named parameter sets shipped in ``presets/``.

A preset file holds the camelCase keys a client would POST, plus an
optional ``challenge``::

    challenge: reduce_emissions
    parameters:
      solarEnergyAdoption: 65
      windEnergyAdoption: 45
      policyStrength: moderate
"""

from __future__ import annotations

from pathlib import Path

import yaml

from synergy_sim.config.parameters import DEFAULT_CHALLENGE, SimulationParameters


def load_preset(path: str | Path) -> tuple[str, SimulationParameters]:
    """Read one preset file → ``(challenge, parameters)``.

    Missing parameter keys take model defaults.  Raises ``FileNotFoundError``
    for a missing file and ``pydantic.ValidationError`` for bad values.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    challenge = str(data.get("challenge", DEFAULT_CHALLENGE))
    parameters = SimulationParameters.model_validate(data.get("parameters") or {})
    return challenge, parameters


def load_presets(directory: str | Path) -> dict[str, tuple[str, SimulationParameters]]:
    """Load every ``*.yaml`` preset in *directory*, keyed by file stem."""
    return {
        p.stem: load_preset(p)
        for p in sorted(Path(directory).glob("*.yaml"))
    }
