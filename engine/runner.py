"""
Scenario runner — resolves the market regime, projects, and optionally simulates.

Two modes of operation:
  1. Inline:      run_scenario(inputs) blocks until both engines finish
  2. Background:  submit_scenario(executor, inputs) returns a Future; callers
                  keep serving requests and cancel by cancelling the Future
                  or dropping its result

The kernel itself never retains state between calls.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import Optional

from core.config import SimulationConfig
from core.schema import ScenarioInputs, ScenarioResult
from distributions.returns import UniformSource

from .montecarlo import simulate_monte_carlo
from .projection import project_deterministic

logger = logging.getLogger(__name__)


def run_scenario(
    inputs: ScenarioInputs,
    *,
    name: str = "Scenario",
    config: Optional[SimulationConfig] = None,
    rng: Optional[UniformSource] = None,
    with_monte_carlo: bool = True,
) -> ScenarioResult:
    """
    Run the deterministic projection and, unless disabled, the Monte Carlo engine.

    The returned ScenarioResult carries the inputs with the market regime
    already applied, so consumers see the rates that were actually used.
    """
    cfg = config or SimulationConfig()
    projection = project_deterministic(inputs)
    resolved = inputs.with_market_scenario()

    mc = None
    if with_monte_carlo:
        mc = simulate_monte_carlo(inputs, cfg.n_trials, rng, config=cfg)

    logger.debug("Scenario %r: %d projection rows", name, len(projection))
    return ScenarioResult(name=name, inputs=resolved, projection=projection, monte_carlo=mc)


def submit_scenario(
    executor: Executor,
    inputs: ScenarioInputs,
    *,
    name: str = "Scenario",
    config: Optional[SimulationConfig] = None,
    rng: Optional[UniformSource] = None,
    with_monte_carlo: bool = True,
) -> "Future[ScenarioResult]":
    """Schedule run_scenario on `executor`; InvalidInput surfaces from Future.result()."""
    return executor.submit(
        run_scenario,
        inputs,
        name=name,
        config=config,
        rng=rng,
        with_monte_carlo=with_monte_carlo,
    )
