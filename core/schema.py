"""
Kernel data model — scenario inputs, projection rows, Monte Carlo summary.

ScenarioInputs accepts the camelCase payload the scenario form produces
(initialEndowment, withdrawalRate, ...) as well as snake_case keyword args.
Only type coercion happens here; domain checks live in core.utils so the
engine entry points raise a single InvalidInput error kind.

All percentages are annual rates x100 (7.0 means 7%).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class MarketScenario(str, Enum):
    CUSTOM = "custom"
    NORMAL = "normal"
    RECESSION = "recession"
    BULL = "bull"
    STAGFLATION = "stagflation"
    CRISIS_2008 = "crisis-2008"
    BULL_1990S = "bull-1990s"

    @classmethod
    def _missing_(cls, value):
        # the scenario form used "2008-crisis" / "1990s-bull"
        legacy = {"2008-crisis": cls.CRISIS_2008, "1990s-bull": cls.BULL_1990S}
        if isinstance(value, str):
            return legacy.get(value.strip().lower())
        return None


class ScenarioInputs(BaseModel):
    """Parameters for one projection / simulation call. Immutable."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    initial_endowment: float = 1_000_000.0
    withdrawal_rate: float = 4.0
    expected_return: float = 7.0
    return_volatility: float = 15.0
    inflation_rate: float = 2.5
    years_to_project: int = 30
    market_scenario: MarketScenario = MarketScenario.CUSTOM

    @field_validator("market_scenario", mode="before")
    @classmethod
    def _coerce_scenario(cls, v: Any) -> Any:
        if isinstance(v, str):
            return MarketScenario(v)
        return v

    def with_market_scenario(self) -> "ScenarioInputs":
        """Return a copy with the market regime's (return, volatility, inflation) applied."""
        from distributions.regimes import resolve_market_regime

        override = resolve_market_regime(self.market_scenario)
        if not override:
            return self
        return self.model_copy(update=override)

    def to_dict(self, *, by_alias: bool = False) -> Dict[str, Any]:
        return self.model_dump(by_alias=by_alias, mode="json")


@dataclass(frozen=True)
class ProjectionPoint:
    """One year of the deterministic path; balance is the start-of-year value."""
    year: int
    balance: float
    withdrawal: float
    returns: float
    inflation_adjusted_balance: float


PROJECTION_COLUMNS = (
    "year",
    "balance",
    "withdrawal",
    "returns",
    "inflation_adjusted_balance",
)


def projection_to_dataframe(points: Sequence[ProjectionPoint]) -> pd.DataFrame:
    """Per-year table of a deterministic projection (possibly shorter than the horizon)."""
    return pd.DataFrame([asdict(p) for p in points], columns=list(PROJECTION_COLUMNS))


@dataclass(frozen=True)
class MonteCarloResult:
    """
    Cross-trial summary of a Monte Carlo run.

    The five percentile sequences each hold one value per year 0..years_to_project.
    years_until_depletion is the median first-depletion year over depleted trials,
    or None when no trial depleted within the horizon.
    """
    percentile5: List[float]
    percentile25: List[float]
    percentile50: List[float]
    percentile75: List[float]
    percentile95: List[float]
    probability_of_depletion: float
    years_until_depletion: Optional[float]
    n_trials: int = 0
    depletion_years: List[int] = field(default_factory=list)

    @property
    def median(self) -> List[float]:
        return self.percentile50

    @property
    def n_years(self) -> int:
        return len(self.percentile50)

    def to_dataframe(self) -> pd.DataFrame:
        """Percentile bands, one row per year."""
        return pd.DataFrame({
            "year": list(range(self.n_years)),
            "p05": self.percentile5,
            "p25": self.percentile25,
            "p50": self.percentile50,
            "p75": self.percentile75,
            "p95": self.percentile95,
        })


@dataclass(frozen=True)
class ScenarioResult:
    """A named scenario with its deterministic path and, optionally, Monte Carlo bands."""
    name: str
    inputs: ScenarioInputs
    projection: List[ProjectionPoint]
    monte_carlo: Optional[MonteCarloResult] = None

    @property
    def final_balance(self) -> float:
        """Balance carried out of the last emitted year; 0 when the path depleted early."""
        if not self.projection:
            return 0.0
        last = self.projection[-1]
        if last.year < self.inputs.years_to_project:
            return 0.0
        return last.balance

    @property
    def depleted(self) -> bool:
        return bool(self.projection) and self.projection[-1].year < self.inputs.years_to_project
