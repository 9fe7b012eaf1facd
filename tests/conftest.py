"""Shared test fixtures — the parameter sets used across the suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from synergy_sim.config import SimulationParameters


PRESETS_DIR = Path(__file__).parent.parent / "presets"


@pytest.fixture
def balanced() -> SimulationParameters:
    """65% solar / 45% wind, moderate policy."""
    return SimulationParameters(
        solar_energy_adoption=65,
        wind_energy_adoption=45,
        policy_strength="moderate",
    )


@pytest.fixture
def solar_only_max_policy() -> SimulationParameters:
    """100% solar / 0% wind, maximum policy."""
    return SimulationParameters(
        solar_energy_adoption=100,
        wind_energy_adoption=0,
        policy_strength="maximum",
    )


@pytest.fixture
def idle() -> SimulationParameters:
    """No adoption, low policy — business as usual."""
    return SimulationParameters(
        solar_energy_adoption=0,
        wind_energy_adoption=0,
        policy_strength="low",
    )


@pytest.fixture
def forest_high() -> SimulationParameters:
    """110 coverage points, high policy (for the reforestation challenge)."""
    return SimulationParameters(
        solar_energy_adoption=60,
        wind_energy_adoption=50,
        policy_strength="high",
    )


@pytest.fixture
def presets_dir() -> Path:
    return PRESETS_DIR
