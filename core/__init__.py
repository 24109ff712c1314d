"""
Core package — data model, configuration, error kinds, and input validation.
No simulation logic lives here.
"""

from .schema import (
    MarketScenario,
    MonteCarloResult,
    ProjectionPoint,
    ScenarioInputs,
    ScenarioResult,
    projection_to_dataframe,
)
from .config import SimulationConfig
from .errors import EndowmentError, InvalidInput, NumericDomainError
from .utils import linear_quantile, require_finite, validate_inputs, validate_trials

__all__ = [
    "MarketScenario",
    "MonteCarloResult",
    "ProjectionPoint",
    "ScenarioInputs",
    "ScenarioResult",
    "projection_to_dataframe",
    "SimulationConfig",
    "EndowmentError",
    "InvalidInput",
    "NumericDomainError",
    "linear_quantile",
    "require_finite",
    "validate_inputs",
    "validate_trials",
]
