"""
Side-by-side comparison of several scenarios.

compare_scenarios() gives the summary table (one row per scenario);
balance_comparison_frame() lines the deterministic paths up by year for
charting. Paths that depleted early have NaN for the years they never reached.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from core.config import SimulationConfig
from core.schema import ScenarioResult


def compare_scenarios(
    results: Sequence[ScenarioResult],
    *,
    high_risk_threshold: Optional[float] = None,
) -> pd.DataFrame:
    """
    One row per scenario.

    Columns: scenario, initial_endowment, withdrawal_rate, expected_return,
    final_balance, depleted, depletion_risk, high_risk.
    depletion_risk is None when the scenario was run without Monte Carlo.
    """
    if high_risk_threshold is None:
        high_risk_threshold = SimulationConfig().high_risk_threshold

    rows = []
    for res in results:
        risk = res.monte_carlo.probability_of_depletion if res.monte_carlo is not None else None
        rows.append({
            "scenario": res.name,
            "initial_endowment": res.inputs.initial_endowment,
            "withdrawal_rate": res.inputs.withdrawal_rate,
            "expected_return": res.inputs.expected_return,
            "final_balance": res.final_balance,
            "depleted": res.depleted,
            "depletion_risk": risk,
            "high_risk": risk is not None and risk > high_risk_threshold,
        })

    return pd.DataFrame(rows, columns=[
        "scenario", "initial_endowment", "withdrawal_rate", "expected_return",
        "final_balance", "depleted", "depletion_risk", "high_risk",
    ])


def balance_comparison_frame(
    results: Sequence[ScenarioResult],
    *,
    inflation_adjusted: bool = False,
) -> pd.DataFrame:
    """Year-indexed balances, one column per scenario, spanning the longest horizon."""
    if not results:
        return pd.DataFrame(index=pd.Index([], name="year"))

    max_years = max(res.inputs.years_to_project for res in results)
    index = pd.RangeIndex(max_years + 1, name="year")
    frame = pd.DataFrame(index=index)

    for res in results:
        col = np.full(max_years + 1, np.nan)
        for point in res.projection:
            col[point.year] = point.inflation_adjusted_balance if inflation_adjusted else point.balance
        frame[res.name] = col

    return frame
