from __future__ import annotations

import math
import numbers
import operator
from typing import Sequence

from .errors import InvalidInput
from .schema import ScenarioInputs

RATE_FIELDS = ("withdrawal_rate", "expected_return", "return_volatility", "inflation_rate")


def require_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(name, f"expected a number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidInput(name, f"must be finite, got {value}")
    return value


def validate_inputs(inputs: ScenarioInputs) -> None:
    """Entry-point checks shared by the deterministic and Monte Carlo engines."""
    if inputs.years_to_project <= 0:
        raise InvalidInput("years_to_project", f"must be positive, got {inputs.years_to_project}")
    endowment = require_finite("initial_endowment", inputs.initial_endowment)
    if endowment < 0:
        raise InvalidInput("initial_endowment", f"must be non-negative, got {endowment}")
    for name in RATE_FIELDS:
        require_finite(name, getattr(inputs, name))


def validate_trials(n_trials) -> int:
    """Return n_trials as a plain int; any integral type (numpy included) is accepted."""
    if isinstance(n_trials, bool) or not isinstance(n_trials, numbers.Integral):
        raise InvalidInput("n_trials", f"expected an integer, got {n_trials!r}")
    n_trials = operator.index(n_trials)
    if n_trials <= 0:
        raise InvalidInput("n_trials", f"must be positive, got {n_trials}")
    return n_trials


def linear_quantile(sorted_values: Sequence[float], q: float) -> float:
    """
    Quantile q of already-sorted values by interpolating between order statistics:
    p = q*(n-1), result = v[floor(p)] + (p - floor(p)) * (v[ceil(p)] - v[floor(p)]).
    """
    n = len(sorted_values)
    if n == 0:
        raise ValueError("Cannot take a quantile of an empty sequence.")
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"Quantile must be in [0, 1], got {q}")
    p = q * (n - 1)
    lo = math.floor(p)
    hi = math.ceil(p)
    frac = p - lo
    return float(sorted_values[lo] + frac * (sorted_values[hi] - sorted_values[lo]))
