"""Tests for the Box-Muller return generator."""

import math
import random

import numpy as np
import pytest

from core.errors import NumericDomainError
from distributions.returns import UniformSource, draw_uniform, sample_return

from helpers import ScriptedUniform


def test_known_draws_give_known_sample():
    # sqrt(-2 ln e^-0.5) = 1 and cos(0) = 1, so z = 1
    rng = ScriptedUniform([math.exp(-0.5), 0.0])
    assert sample_return(7.0, 15.0, rng) == pytest.approx(22.0)


def test_half_turn_gives_negative_shock():
    rng = ScriptedUniform([math.exp(-0.5), 0.5])
    assert sample_return(7.0, 15.0, rng) == pytest.approx(-8.0)


def test_zero_first_draw_is_resampled():
    rng = ScriptedUniform([0.0, 0.0, math.exp(-0.5), 0.0])
    assert sample_return(0.0, 1.0, rng) == pytest.approx(1.0)
    assert rng.calls == 4


def test_zero_volatility_returns_mean():
    rng = np.random.default_rng(1)
    assert sample_return(4.5, 0.0, rng) == 4.5


def test_out_of_range_draw_is_fatal():
    with pytest.raises(NumericDomainError):
        draw_uniform(ScriptedUniform([1.0]))
    with pytest.raises(NumericDomainError):
        draw_uniform(ScriptedUniform([-0.1]))


def test_only_zero_draws_is_fatal():
    rng = ScriptedUniform([0.0] * 4)
    with pytest.raises(NumericDomainError):
        draw_uniform(rng, nonzero=True, max_retries=3)


def test_common_sources_satisfy_protocol():
    assert isinstance(np.random.default_rng(0), UniformSource)
    assert isinstance(random.Random(0), UniformSource)


def test_sample_moments_match_parameters():
    rng = np.random.default_rng(2024)
    draws = np.array([sample_return(7.0, 15.0, rng) for _ in range(20_000)])
    assert draws.mean() == pytest.approx(7.0, abs=0.5)
    assert draws.std() == pytest.approx(15.0, rel=0.05)
