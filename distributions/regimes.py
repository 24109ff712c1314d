"""
Named market regimes — fixed (return, volatility, inflation) bundles.

Selecting a regime other than "custom" replaces the caller's expected return,
volatility and inflation with these policy constants. They are not estimated
from data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

import pandas as pd

from core.schema import MarketScenario


@dataclass(frozen=True)
class MarketRegime:
    """One macroeconomic scenario; all values are annual percentages."""
    expected_return: float
    return_volatility: float
    inflation_rate: float
    description: str = ""

    def as_override(self) -> Dict[str, float]:
        return {
            "expected_return": self.expected_return,
            "return_volatility": self.return_volatility,
            "inflation_rate": self.inflation_rate,
        }


MARKET_REGIMES: Dict[MarketScenario, MarketRegime] = {
    MarketScenario.NORMAL: MarketRegime(7.0, 15.0, 2.5, "Long-run balanced portfolio"),
    MarketScenario.RECESSION: MarketRegime(-5.0, 25.0, 1.0, "Contraction with falling prices"),
    MarketScenario.BULL: MarketRegime(12.0, 12.0, 3.0, "Sustained expansion"),
    MarketScenario.STAGFLATION: MarketRegime(3.0, 20.0, 7.0, "Weak growth, high inflation (1970s)"),
    MarketScenario.CRISIS_2008: MarketRegime(-15.0, 40.0, 0.5, "Global financial crisis"),
    MarketScenario.BULL_1990S: MarketRegime(18.0, 10.0, 3.0, "1990s equity boom"),
}


def resolve_market_regime(name: Union[MarketScenario, str, None]) -> Dict[str, float]:
    """
    Return the parameter override for a named regime.

    Returns an empty dict for "custom" or any unrecognized name, meaning the
    caller's own values are used unchanged. Never raises.
    """
    if name is None:
        return {}
    try:
        scenario = MarketScenario(name)
    except ValueError:
        return {}
    regime = MARKET_REGIMES.get(scenario)
    if regime is None:
        return {}
    return regime.as_override()


def regime_table() -> pd.DataFrame:
    """Summary of all named regimes."""
    return pd.DataFrame([
        {
            "Scenario": scenario.value,
            "Expected Return (%)": r.expected_return,
            "Volatility (%)": r.return_volatility,
            "Inflation (%)": r.inflation_rate,
            "Description": r.description,
        }
        for scenario, r in MARKET_REGIMES.items()
    ])
