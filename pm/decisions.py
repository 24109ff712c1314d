"""
Sustainability flags — turn one scenario's results into statements a
finance committee can act on:
  Q1: "Will the fund run dry?"          → P(depletion) across trials
  Q2: "When, if it does?"               → median first-depletion year
  Q3: "Does spending keep up?"          → deterministic path reaching the horizon
  Q4: "Is purchasing power preserved?"  → final inflation-adjusted balance vs. initial
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from core.config import SimulationConfig
from core.schema import ScenarioResult


@dataclass
class SustainabilityReport:
    """Structured summary of one scenario."""
    scenario_name: str
    initial_endowment: float
    years_to_project: int

    # Deterministic path
    final_balance: float
    final_real_balance: float
    depleted_deterministic: bool

    # Monte Carlo (None when not run)
    probability_of_depletion: Optional[float]
    median_depletion_year: Optional[float]
    median_final_balance: Optional[float]
    p05_final_balance: Optional[float]
    p95_final_balance: Optional[float]

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        def money(v: Optional[float]) -> str:
            return f"{v:,.2f}" if v is not None else "N/A"

        rows = [
            {"Metric": "Scenario", "Value": self.scenario_name, "Unit": ""},
            {"Metric": "Initial Endowment", "Value": money(self.initial_endowment), "Unit": "$"},
            {"Metric": "Horizon", "Value": str(self.years_to_project), "Unit": "years"},
            {"Metric": "Final Balance", "Value": money(self.final_balance), "Unit": "$"},
            {"Metric": "Final Real Balance", "Value": money(self.final_real_balance), "Unit": "$"},
            {"Metric": "P(Depletion)",
             "Value": f"{self.probability_of_depletion:.1%}" if self.probability_of_depletion is not None else "N/A",
             "Unit": ""},
            {"Metric": "Median Depletion Year",
             "Value": f"{self.median_depletion_year:.1f}" if self.median_depletion_year is not None else "N/A",
             "Unit": "years"},
            {"Metric": "Median Final Balance", "Value": money(self.median_final_balance), "Unit": "$"},
            {"Metric": "5th Pctl Final Balance", "Value": money(self.p05_final_balance), "Unit": "$"},
            {"Metric": "95th Pctl Final Balance", "Value": money(self.p95_final_balance), "Unit": "$"},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def generate_sustainability_report(
    result: ScenarioResult,
    *,
    high_risk_threshold: Optional[float] = None,
) -> SustainabilityReport:
    """
    Build a SustainabilityReport from a ScenarioResult.

    Parameters
    ----------
    result : ScenarioResult
        Output of engine.runner.run_scenario().
    high_risk_threshold : float, optional
        P(depletion) above which HIGH_DEPLETION_RISK is raised
        (defaults to SimulationConfig.high_risk_threshold, 20%).
    """
    if not result.projection:
        raise ValueError("No projection rows to generate report from.")
    if high_risk_threshold is None:
        high_risk_threshold = SimulationConfig().high_risk_threshold

    inputs = result.inputs
    last = result.projection[-1]
    final_real = 0.0 if result.depleted else last.inflation_adjusted_balance

    mc = result.monte_carlo
    prob = mc.probability_of_depletion if mc is not None else None

    flags = []
    if prob is not None and prob > high_risk_threshold:
        flags.append(f"HIGH_DEPLETION_RISK: {prob:.0%} of trials run out of money")
    if result.depleted:
        flags.append(f"EARLY_DEPLETION: expected path runs out after year {last.year}")
    if final_real < inputs.initial_endowment:
        flags.append("REAL_VALUE_EROSION: final inflation-adjusted balance below initial endowment")

    return SustainabilityReport(
        scenario_name=result.name,
        initial_endowment=inputs.initial_endowment,
        years_to_project=inputs.years_to_project,
        final_balance=result.final_balance,
        final_real_balance=final_real,
        depleted_deterministic=result.depleted,
        probability_of_depletion=prob,
        median_depletion_year=mc.years_until_depletion if mc is not None else None,
        median_final_balance=mc.percentile50[-1] if mc is not None else None,
        p05_final_balance=mc.percentile5[-1] if mc is not None else None,
        p95_final_balance=mc.percentile95[-1] if mc is not None else None,
        flags=flags,
    )
