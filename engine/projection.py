"""
Deterministic projection — the expected return is earned exactly every year.

Each row carries the start-of-year balance together with that year's
withdrawal and return. The path stops at the first year whose end balance
is <= 0; it is NOT padded out to the horizon, so the result can be shorter
than years_to_project + 1 rows.
"""

from __future__ import annotations

import logging
from typing import List

from core.schema import ProjectionPoint, ScenarioInputs
from core.utils import validate_inputs

logger = logging.getLogger(__name__)


def project_deterministic(inputs: ScenarioInputs) -> List[ProjectionPoint]:
    """
    Year-by-year balances for years 0..years_to_project.

    A named market scenario overrides the expected return and inflation
    before projecting. Raises InvalidInput for a non-positive horizon, a
    negative endowment, or a non-finite rate.
    """
    inputs = inputs.with_market_scenario()
    validate_inputs(inputs)

    w_rate = inputs.withdrawal_rate / 100.0
    r_rate = inputs.expected_return / 100.0
    inflation = 1.0 + inputs.inflation_rate / 100.0

    points: List[ProjectionPoint] = []
    balance = float(inputs.initial_endowment)

    for year in range(inputs.years_to_project + 1):
        withdrawal = balance * w_rate
        returns = balance * r_rate
        points.append(ProjectionPoint(
            year=year,
            balance=balance,
            withdrawal=withdrawal,
            returns=returns,
            inflation_adjusted_balance=balance / inflation ** year,
        ))

        balance = balance + (returns - withdrawal)
        if balance <= 0:
            logger.debug("Deterministic path depleted after year %d", year)
            break

    return points
