"""
Monte Carlo engine — many independent trials of the endowment balance path.

Each trial is a stateless task: (inputs, uniform stream) -> (path, first
depletion year). Trials share nothing, so the engine spawns them, joins,
and only then aggregates:

  1. Split the injected source into one child stream per trial when it can
     spawn (numpy Generator); otherwise every trial reads the shared source
     in trial order.
  2. Run the trials, on a thread pool when config.max_workers > 1 and the
     streams are independent.
  3. Stack the paths into an (n_trials, years + 1) matrix and hand it to
     pm.aggregator for percentile bands and depletion statistics.

Unlike the deterministic projection, a depleted trial is zero-padded to the
full horizon so every path has the same length.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

import numpy as np

from core.config import SimulationConfig
from core.schema import MonteCarloResult, ScenarioInputs
from core.utils import validate_inputs, validate_trials
from distributions.returns import UniformSource, sample_return
from pm.aggregator import aggregate_percentiles, summarize_depletion

logger = logging.getLogger(__name__)

TrialOutcome = Tuple[List[float], Optional[int]]


def _run_trial(
    inputs: ScenarioInputs,
    rng: UniformSource,
    max_retries: int,
) -> TrialOutcome:
    """One balance path of length years_to_project + 1 and its first depletion year."""
    w_rate = inputs.withdrawal_rate / 100.0
    mu = inputs.expected_return
    sigma = inputs.return_volatility

    path: List[float] = []
    balance = float(inputs.initial_endowment)
    depletion_year: Optional[int] = None

    for year in range(inputs.years_to_project + 1):
        # start-of-year value; an overshoot below zero is recorded once, then clamped
        path.append(balance)

        if balance <= 0:
            if depletion_year is None:
                depletion_year = year
            balance = 0.0
            continue

        withdrawal = balance * w_rate
        r = sample_return(mu, sigma, rng, max_retries=max_retries)
        returns = balance * (r / 100.0)
        balance = balance + (returns - withdrawal)

    return path, depletion_year


def _trial_streams(rng: UniformSource, n_trials: int) -> Optional[Sequence[UniformSource]]:
    spawn = getattr(rng, "spawn", None)
    if spawn is None:
        return None
    return spawn(n_trials)


def run_trials(
    inputs: ScenarioInputs,
    n_trials: int,
    rng: UniformSource,
    *,
    config: Optional[SimulationConfig] = None,
) -> Tuple[np.ndarray, List[int]]:
    """
    Run every trial and return the raw outputs.

    Returns
    -------
    (paths, depletion_years)
    paths: array of shape (n_trials, years_to_project + 1)
    depletion_years: first depletion year of each depleted trial, in trial order
    """
    cfg = config or SimulationConfig()
    inputs = inputs.with_market_scenario()
    validate_inputs(inputs)
    n_trials = validate_trials(n_trials)

    streams = _trial_streams(rng, n_trials)
    retries = cfg.max_uniform_retries

    if streams is None:
        logger.debug("Uniform source cannot spawn streams; running %d trials sequentially", n_trials)
        outcomes = [_run_trial(inputs, rng, retries) for _ in range(n_trials)]
    elif cfg.max_workers > 1:
        logger.debug("Running %d trials on %d workers", n_trials, cfg.max_workers)
        with ThreadPoolExecutor(max_workers=cfg.max_workers) as pool:
            outcomes = list(pool.map(lambda s: _run_trial(inputs, s, retries), streams))
    else:
        outcomes = [_run_trial(inputs, s, retries) for s in streams]

    paths = np.array([path for path, _ in outcomes], dtype=float)
    depletion_years = [year for _, year in outcomes if year is not None]
    return paths, depletion_years


def simulate_monte_carlo(
    inputs: ScenarioInputs,
    n_trials: Optional[int] = None,
    rng: Optional[UniformSource] = None,
    *,
    config: Optional[SimulationConfig] = None,
) -> MonteCarloResult:
    """
    Simulate n_trials random return paths and summarize them.

    Parameters
    ----------
    inputs : ScenarioInputs
        Scenario parameters; a named market scenario overrides return,
        volatility and inflation.
    n_trials : int, optional
        Number of trials (defaults to config.n_trials, 1000).
    rng : UniformSource, optional
        Uniform source in [0, 1). Built from config.seed when omitted.
    config : SimulationConfig, optional
        Default trial count, seed, worker count and retry limit.

    Raises InvalidInput for bad scenario parameters or n_trials <= 0.
    """
    cfg = config or SimulationConfig()
    if n_trials is None:
        n_trials = cfg.n_trials
    if rng is None:
        rng = cfg.make_rng()

    paths, depletion_years = run_trials(inputs, n_trials, rng, config=cfg)
    n_trials = paths.shape[0]

    bands = aggregate_percentiles(paths)
    prob, median_year = summarize_depletion(depletion_years, n_trials)
    logger.info(
        "Monte Carlo: %d trials, %d years, P(depletion)=%.3f",
        n_trials, paths.shape[1] - 1, prob,
    )

    return MonteCarloResult(
        percentile5=bands["percentile5"],
        percentile25=bands["percentile25"],
        percentile50=bands["percentile50"],
        percentile75=bands["percentile75"],
        percentile95=bands["percentile95"],
        probability_of_depletion=prob,
        years_until_depletion=median_year,
        n_trials=n_trials,
        depletion_years=depletion_years,
    )
