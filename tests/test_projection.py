"""Tests for the deterministic projection."""

import math

import pytest

from core.errors import InvalidInput
from core.schema import ScenarioInputs, projection_to_dataframe
from engine.projection import project_deterministic


def _inputs(**overrides) -> ScenarioInputs:
    params = dict(
        initial_endowment=1_000_000.0,
        withdrawal_rate=5.0,
        expected_return=5.0,
        return_volatility=15.0,
        inflation_rate=0.0,
        years_to_project=20,
    )
    params.update(overrides)
    return ScenarioInputs(**params)


@pytest.mark.parametrize("endowment, rate", [(1_000_000.0, 5.0), (123456.789, 7.3)])
def test_steady_state_when_withdrawal_equals_return(endowment, rate):
    points = project_deterministic(_inputs(
        initial_endowment=endowment, withdrawal_rate=rate, expected_return=rate, years_to_project=50,
    ))
    assert len(points) == 51
    for point in points:
        assert point.balance == endowment
        assert point.inflation_adjusted_balance == endowment


def test_full_depletion_in_one_step():
    points = project_deterministic(_inputs(
        initial_endowment=100.0, withdrawal_rate=100.0, expected_return=0.0, years_to_project=10,
    ))
    assert len(points) == 1
    only = points[0]
    assert (only.year, only.balance, only.withdrawal, only.returns) == (0, 100.0, 100.0, 0.0)


def test_rows_use_start_of_year_balance():
    points = project_deterministic(_inputs(
        initial_endowment=1000.0, withdrawal_rate=4.0, expected_return=10.0,
        inflation_rate=2.0, years_to_project=2,
    ))
    assert [p.year for p in points] == [0, 1, 2]
    assert points[0].withdrawal == pytest.approx(40.0)
    assert points[0].returns == pytest.approx(100.0)
    assert points[1].balance == pytest.approx(1060.0)
    assert points[2].balance == pytest.approx(1060.0 * 1.06)
    assert points[2].inflation_adjusted_balance == pytest.approx(1060.0 * 1.06 / 1.02 ** 2)


def test_path_stops_at_depletion_and_is_not_padded():
    points = project_deterministic(_inputs(
        initial_endowment=1000.0, withdrawal_rate=60.0, expected_return=-50.0, years_to_project=30,
    ))
    # 1000 -> -100 after year 0
    assert len(points) == 1
    assert all(p.balance >= 0 for p in points)


def test_named_scenario_drives_the_projection():
    points = project_deterministic(_inputs(
        withdrawal_rate=0.0, expected_return=50.0, market_scenario="recession", years_to_project=1,
    ))
    assert points[0].returns == pytest.approx(-50_000.0)


def test_zero_endowment_is_a_single_row():
    points = project_deterministic(_inputs(initial_endowment=0.0))
    assert len(points) == 1
    assert points[0].balance == 0.0


@pytest.mark.parametrize("overrides, field", [
    ({"years_to_project": 0}, "years_to_project"),
    ({"years_to_project": -3}, "years_to_project"),
    ({"initial_endowment": -1.0}, "initial_endowment"),
    ({"withdrawal_rate": math.nan}, "withdrawal_rate"),
    ({"expected_return": math.inf}, "expected_return"),
    ({"inflation_rate": -math.inf}, "inflation_rate"),
    ({"return_volatility": math.nan}, "return_volatility"),
])
def test_invalid_inputs_are_rejected(overrides, field):
    with pytest.raises(InvalidInput) as excinfo:
        project_deterministic(_inputs(**overrides))
    assert excinfo.value.field == field


def test_camel_case_payload_and_dataframe():
    inputs = ScenarioInputs.model_validate({
        "initialEndowment": 500_000,
        "withdrawalRate": 4,
        "expectedReturn": 7,
        "returnVolatility": 15,
        "inflationRate": 2.5,
        "yearsToProject": 5,
        "marketScenario": "custom",
    })
    df = projection_to_dataframe(project_deterministic(inputs))
    assert list(df.columns) == ["year", "balance", "withdrawal", "returns", "inflation_adjusted_balance"]
    assert len(df) == 6
    assert df.loc[0, "balance"] == 500_000


def test_named_scenario_replaces_non_finite_caller_rates():
    points = project_deterministic(_inputs(
        expected_return=math.nan, inflation_rate=math.inf, market_scenario="recession",
        years_to_project=3,
    ))
    assert len(points) == 4
    assert points[0].returns == pytest.approx(-50_000.0)


def test_custom_scenario_still_rejects_non_finite_rates():
    with pytest.raises(InvalidInput):
        project_deterministic(_inputs(expected_return=math.nan, market_scenario="custom"))
