"""Rule-based feedback on a run — suggestions, benchmark label, synergy tip."""

from __future__ import annotations

from synergy_sim.config.parameters import SimulationParameters
from synergy_sim.models.results import SimulationOutcomes

MAX_SUGGESTIONS = 3

_BENCHMARK_TIERS: tuple[tuple[float, str], ...] = (
    (85.0, "Exceptional - Your solution exceeds current best practices"),
    (75.0, "Excellent - Comparable to leading climate initiatives"),
    (65.0, "Good - Aligns with mainstream climate targets"),
    (50.0, "Moderate - Room for improvement in key areas"),
)
_BENCHMARK_FLOOR = "Challenging - Consider revising your approach"


def suggest_optimizations(
    parameters: SimulationParameters,
    outcomes: SimulationOutcomes,
) -> list[str]:
    """Up to three actionable suggestions, most important first."""
    solar = parameters.solar_energy_adoption
    wind = parameters.wind_energy_adoption
    suggestions: list[str] = []

    if outcomes.temperature_change > 2.0:
        suggestions.append("Consider increasing renewable energy adoption to meet the 2°C target")

    if abs(solar - wind) > 40:
        if solar > wind:
            suggestions.append("Try increasing wind energy to create a more balanced renewable portfolio")
        else:
            suggestions.append("Try increasing solar energy to complement your wind strategy")

    if parameters.policy_strength == "low" and parameters.total_adoption > 100:
        suggestions.append("With high renewable targets, stronger policy support could improve feasibility")

    if outcomes.roi < 150:
        suggestions.append("Consider adjusting the renewable energy mix to improve economic returns")

    if outcomes.feasibility_score < 60:
        suggestions.append("Current parameters may be challenging to implement - consider a more gradual approach")

    if outcomes.sustainability_score < 70:
        suggestions.append("Increase overall renewable adoption for better long-term sustainability")

    return suggestions[:MAX_SUGGESTIONS]


def average_score(outcomes: SimulationOutcomes) -> float:
    return (
        outcomes.feasibility_score
        + outcomes.sustainability_score
        + outcomes.global_impact_score
    ) / 3


def benchmark_solution(outcomes: SimulationOutcomes) -> str:
    """Place the run against real-world initiatives by its mean score."""
    avg = average_score(outcomes)
    for threshold, label in _BENCHMARK_TIERS:
        if avg >= threshold:
            return label
    return _BENCHMARK_FLOOR


def synergy_tip(synergy_score: float) -> str:
    if synergy_score < 60:
        return "Try balancing renewable energy sources for better sustainability!"
    if synergy_score < 80:
        return "Great progress! Consider stronger policy measures to maximize impact."
    return "Excellent solution! Your approach shows strong synergy across all metrics."


def default_description(challenge: str, parameters: SimulationParameters) -> str:
    """Fallback description for a saved solution with no user text."""
    # Only the first underscore is replaced, matching existing saved solutions
    label = challenge.replace("_", " ", 1)
    return (
        f"A {label} solution using {_fmt_pct(parameters.solar_energy_adoption)}% solar and "
        f"{_fmt_pct(parameters.wind_energy_adoption)}% wind energy with "
        f"{parameters.policy_strength} policy strength."
    )


def _fmt_pct(value: float) -> str:
    """65.0 → '65', 62.5 → '62.5'."""
    return f"{value:g}"
