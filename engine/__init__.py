"""
Projection engine — deterministic balance path + Monte Carlo trial runner.
"""

from .projection import project_deterministic
from .montecarlo import run_trials, simulate_monte_carlo
from .runner import run_scenario, submit_scenario

__all__ = [
    "project_deterministic",
    "run_trials",
    "simulate_monte_carlo",
    "run_scenario",
    "submit_scenario",
]
