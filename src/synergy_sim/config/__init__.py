"""Configuration models — simulation inputs and model constant tables."""

from synergy_sim.config.parameters import (
    CHALLENGES,
    DEFAULT_CHALLENGE,
    POLICY_LEVELS,
    ChallengeId,
    PolicyStrength,
    SimulationParameters,
)
from synergy_sim.config.constants import (
    DEFAULT_EMISSIONS_CONFIG,
    DEFAULT_POLICY_TABLE,
    DEFAULT_REFORESTATION_CONFIG,
    DEFAULT_SCORING_CONFIG,
    EmissionsModelConfig,
    PolicyLevels,
    PolicyTable,
    ReforestationModelConfig,
    ScoringConfig,
)
from synergy_sim.config.loader import load_preset, load_presets

__all__ = [
    "CHALLENGES",
    "DEFAULT_CHALLENGE",
    "POLICY_LEVELS",
    "ChallengeId",
    "PolicyStrength",
    "SimulationParameters",
    "DEFAULT_EMISSIONS_CONFIG",
    "DEFAULT_POLICY_TABLE",
    "DEFAULT_REFORESTATION_CONFIG",
    "DEFAULT_SCORING_CONFIG",
    "EmissionsModelConfig",
    "PolicyLevels",
    "PolicyTable",
    "ReforestationModelConfig",
    "ScoringConfig",
    "load_preset",
    "load_presets",
]
