"""
Annual return generator — one Gaussian draw per call via Box-Muller.

The uniform source is always passed in, never taken from a module-level
global, so a fixed seed reproduces a run exactly:

    rng = np.random.default_rng(7)
    r = sample_return(7.0, 15.0, rng)   # percent, e.g. 9.81

Anything with a ``random() -> float`` method in [0, 1) works: numpy's
Generator, random.Random, or a scripted stub in tests.
"""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from core.errors import NumericDomainError

DEFAULT_MAX_RETRIES = 16


@runtime_checkable
class UniformSource(Protocol):
    def random(self) -> float:
        ...


def draw_uniform(
    rng: UniformSource,
    *,
    nonzero: bool = False,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> float:
    """
    Next uniform draw in [0, 1), or (0, 1) when nonzero=True.

    Zero draws are rejected and resampled up to max_retries times. A value
    outside [0, 1) means the source is broken and is never retried.
    """
    for _ in range(max_retries + 1):
        u = float(rng.random())
        if not 0.0 <= u < 1.0:
            raise NumericDomainError(f"Uniform source returned {u!r}, outside [0, 1).")
        if nonzero and u == 0.0:
            continue
        return u
    raise NumericDomainError(
        f"Uniform source returned 0.0 on {max_retries + 1} consecutive draws."
    )


def standard_normal(rng: UniformSource, *, max_retries: int = DEFAULT_MAX_RETRIES) -> float:
    """z = sqrt(-2 ln u1) * cos(2 pi u2), with u1 guarded against zero."""
    u1 = draw_uniform(rng, nonzero=True, max_retries=max_retries)
    u2 = draw_uniform(rng, max_retries=max_retries)
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def sample_return(
    expected_return: float,
    volatility: float,
    rng: UniformSource,
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> float:
    """One annual return sample (percent) with mean expected_return and std volatility."""
    return expected_return + volatility * standard_normal(rng, max_retries=max_retries)
