"""
Preset spending-policy templates offered alongside the scenario form.

Each preset is a partial set of ScenarioInputs fields; merging one into a
scenario leaves the endowment size and market regime untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from core.schema import ScenarioInputs


@dataclass(frozen=True)
class PresetTemplate:
    name: str
    description: str
    inputs: Dict[str, float]


PRESET_TEMPLATES: List[PresetTemplate] = [
    PresetTemplate(
        name="Standard 4% Rule",
        description="Traditional endowment spending rule with 4% annual withdrawal",
        inputs={"withdrawal_rate": 4, "expected_return": 7, "return_volatility": 15,
                "inflation_rate": 2.5, "years_to_project": 30},
    ),
    PresetTemplate(
        name="Conservative 3% Model",
        description="Lower withdrawal rate for enhanced sustainability",
        inputs={"withdrawal_rate": 3, "expected_return": 6, "return_volatility": 12,
                "inflation_rate": 2.5, "years_to_project": 50},
    ),
    PresetTemplate(
        name="University Endowment Model",
        description="Typical university endowment with 5% spending policy",
        inputs={"withdrawal_rate": 5, "expected_return": 8, "return_volatility": 16,
                "inflation_rate": 3, "years_to_project": 40},
    ),
    PresetTemplate(
        name="Foundation Payout Minimum",
        description="IRS minimum 5% distribution requirement for private foundations",
        inputs={"withdrawal_rate": 5, "expected_return": 7.5, "return_volatility": 14,
                "inflation_rate": 2.5, "years_to_project": 30},
    ),
    PresetTemplate(
        name="Aggressive Growth",
        description="Higher risk/return profile with lower withdrawal",
        inputs={"withdrawal_rate": 3.5, "expected_return": 10, "return_volatility": 20,
                "inflation_rate": 3, "years_to_project": 30},
    ),
    PresetTemplate(
        name="Perpetual Preservation",
        description="Ultra-conservative approach for perpetual capital preservation",
        inputs={"withdrawal_rate": 2.5, "expected_return": 5, "return_volatility": 10,
                "inflation_rate": 2, "years_to_project": 100},
    ),
]

_PRESETS_BY_NAME: Dict[str, PresetTemplate] = {p.name: p for p in PRESET_TEMPLATES}


def get_preset(name: str) -> Dict[str, float]:
    """
    Return a copy of a preset's partial inputs.

    Parameters
    ----------
    name : str
        One of the PRESET_TEMPLATES names, e.g. "Standard 4% Rule".
    """
    if name not in _PRESETS_BY_NAME:
        raise KeyError(
            f"Unknown preset '{name}'. "
            f"Available: {list(_PRESETS_BY_NAME.keys())}"
        )
    return dict(_PRESETS_BY_NAME[name].inputs)


def apply_preset(inputs: ScenarioInputs, name: str) -> ScenarioInputs:
    """New ScenarioInputs with the preset's fields merged over `inputs`."""
    return ScenarioInputs.model_validate({**inputs.model_dump(), **get_preset(name)})
