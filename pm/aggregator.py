"""
Aggregate trial paths into per-year percentile bands and depletion statistics.

Percentiles interpolate linearly between order statistics: for quantile q
over n sorted balances, p = q*(n-1) and the result lies between
values[floor(p)] and values[ceil(p)]. numpy's "linear" method is exactly this
rule; nearest-rank variants drift noticeably on small trial counts.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.errors import InvalidInput
from core.schema import MonteCarloResult

BAND_PERCENTILES: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95)


def band_label(q: float) -> str:
    return f"percentile{int(round(q * 100))}"


def aggregate_percentiles(
    paths,
    *,
    percentiles: Tuple[float, ...] = BAND_PERCENTILES,
) -> Dict[str, List[float]]:
    """
    Cross-trial percentiles for every year.

    Parameters
    ----------
    paths : array-like, shape (n_trials, n_years)
        One balance path per trial, all the same length.
    percentiles : tuple of float
        Quantile levels in [0, 1].

    Returns
    -------
    Dict mapping "percentile5", "percentile25", ... to per-year lists.
    """
    arr = np.asarray(paths, dtype=float)
    if arr.ndim != 2 or arr.shape[0] == 0:
        raise InvalidInput("paths", "need at least one trial path of shape (n_trials, n_years)")

    return {
        band_label(q): np.percentile(arr, q * 100, axis=0, method="linear").tolist()
        for q in percentiles
    }


def summarize_depletion(
    depletion_years: Sequence[int],
    n_trials: int,
) -> Tuple[float, Optional[float]]:
    """
    (probability_of_depletion, median first-depletion year or None).

    None means no trial depleted within the horizon.
    """
    if n_trials <= 0:
        raise InvalidInput("n_trials", f"must be positive, got {n_trials}")
    n_depleted = len(depletion_years)
    prob = n_depleted / n_trials
    median_year = float(np.median(depletion_years)) if n_depleted > 0 else None
    return prob, median_year


def percentile_bands_frame(result: MonteCarloResult) -> pd.DataFrame:
    """Bands with the spread between the 5th and 95th percentile per year."""
    df = result.to_dataframe()
    df["spread_5_95"] = df["p95"] - df["p05"]
    return df
