"""
Distributions package — market assumptions and the annual return sampler.

  1. regimes.py  — named market regimes (fixed return/volatility/inflation)
  2. presets.py  — spending-policy templates for the scenario form
  3. returns.py  — Box-Muller annual return generator over an injected uniform source
"""

from .regimes import MARKET_REGIMES, MarketRegime, regime_table, resolve_market_regime
from .presets import PRESET_TEMPLATES, PresetTemplate, apply_preset, get_preset
from .returns import UniformSource, draw_uniform, sample_return, standard_normal

__all__ = [
    "MARKET_REGIMES",
    "MarketRegime",
    "regime_table",
    "resolve_market_regime",
    "PRESET_TEMPLATES",
    "PresetTemplate",
    "apply_preset",
    "get_preset",
    "UniformSource",
    "draw_uniform",
    "sample_return",
    "standard_normal",
]
