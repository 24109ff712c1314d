"""
Simulation configuration.
Scenario parameters live in core/schema.py (ScenarioInputs).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SimulationConfig:
    n_trials: int = 1000
    seed: int = 42

    # >1 runs trials on a thread pool (only when the rng can spawn per-trial streams)
    max_workers: int = 1

    # zero draws rejected by the return generator before giving up
    max_uniform_retries: int = 16

    # depletion probability above which a scenario is flagged high risk
    high_risk_threshold: float = 0.20

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
