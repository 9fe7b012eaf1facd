"""Narrative generator — plain-English interpretation of simulation results.

Converts a ``SimulationResult`` into a sectioned text report explaining the
climate outcome, the economics, the scores, and what to try next.
"""

from __future__ import annotations

from synergy_sim.engine.insights import average_score
from synergy_sim.models.results import SimulationResult

_RULE = "=" * 60


def _heading(sections: list[str], title: str) -> None:
    if sections:
        sections.append("")
    sections.append(_RULE)
    sections.append(title)
    sections.append(_RULE)


def _paris_verdict(temperature_change: float) -> str:
    if temperature_change <= 1.5:
        return "meets the Paris 1.5°C goal"
    if temperature_change <= 2.0:
        return "meets the Paris 2°C goal"
    return "misses both Paris targets"


def generate_narrative(result: SimulationResult) -> str:
    """Generate a plain-English narrative from a simulation result.

    Returns a structured text block covering:
      1. Plan summary
      2. Climate outcome
      3. Economics
      4. Scores and benchmark
      5. Recommendations
    """
    p = result.parameters
    o = result.outcomes
    sections: list[str] = []

    # ── 1. Plan ──
    _heading(sections, "PLAN SUMMARY")
    challenge_line = f"Challenge: {result.resolved_challenge}"
    if result.resolved_challenge != result.challenge:
        challenge_line += f" (requested '{result.challenge}', not a known challenge)"
    sections.append(
        f"{challenge_line}\n"
        f"Solar adoption: {p.solar_energy_adoption:g}%\n"
        f"Wind adoption: {p.wind_energy_adoption:g}%\n"
        f"Policy strength: {p.policy_strength}"
    )

    # ── 2. Climate ──
    _heading(sections, "CLIMATE OUTCOME")
    sections.append(
        f"CO2 reduction: {o.co2_reduction:.1f}% of global baseline\n"
        f"Projected warming: {o.temperature_change:.1f}°C — {_paris_verdict(o.temperature_change)}"
    )

    # ── 3. Economics ──
    _heading(sections, "ECONOMICS")
    roi_sign = "POSITIVE" if o.roi > 0 else "NEGATIVE"
    sections.append(
        f"Total cost: ${o.economic_impact:,.1f}B\n"
        f"Return on investment: {o.roi:.1f}% ({roi_sign})"
    )

    # ── 4. Scores ──
    _heading(sections, "SCORES")
    for name, val in (
        ("Feasibility", o.feasibility_score),
        ("Sustainability", o.sustainability_score),
        ("Global impact", o.global_impact_score),
        ("Synergy", result.synergy_score),
        ("Parameter synergy", result.parameter_synergy),
    ):
        sections.append(f"  {name:20s}  {val:3d}/100")
    sections.append(f"\nAverage outcome score: {average_score(o):.1f}")
    sections.append(f"Benchmark: {result.benchmark}")

    # ── 5. Recommendations ──
    _heading(sections, "RECOMMENDATIONS")
    recs = list(result.suggestions) or ["No critical issues identified. Run sensitivity analysis to test robustness."]
    for i, rec in enumerate(recs, 1):
        sections.append(f"  {i}. {rec}")
    sections.append(f"\nTip: {result.synergy_tip}")

    return "\n".join(sections)


def generate_comparison_narrative(results: list[SimulationResult], labels: list[str]) -> str:
    """Side-by-side table of several runs, best synergy first."""
    if len(results) < 2:
        return generate_narrative(results[0]) if results else "No results to compare."

    sections: list[str] = []
    _heading(sections, "SOLUTION COMPARISON")
    sections.append(f"Comparing {len(results)} solutions:\n")

    rows = sorted(zip(labels, results), key=lambda r: r[1].synergy_score, reverse=True)

    header = f"{'Solution':25s}  {'Synergy':>7s}  {'CO2 %':>6s}  {'Temp °C':>7s}  {'Cost $B':>10s}  {'ROI %':>8s}"
    sections.append(header)
    sections.append("-" * len(header))
    for label, r in rows:
        o = r.outcomes
        sections.append(
            f"{label:25s}  {r.synergy_score:>7d}  {o.co2_reduction:>6.1f}  "
            f"{o.temperature_change:>7.1f}  {o.economic_impact:>10,.1f}  {o.roi:>8.1f}"
        )

    best_label, best = rows[0]
    worst_label, worst = rows[-1]
    sections.append(f"\nBest option: {best_label} (synergy {best.synergy_score})")
    sections.append(
        f"Leads {worst_label} by {best.synergy_score - worst.synergy_score} synergy points."
    )

    return "\n".join(sections)
