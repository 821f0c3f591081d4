"""
Tabular summaries of distributions.

Instead of one number per variable, report the spread:
  "Total: mean=4.5, median=4.3, P05=3.2, P95=7.1"
Parametric percentiles come from icdf(); nonparametric ones from the stored
samples.
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

import numpy as np
import pandas as pd

from core.config import DEFAULT_PERCENTILES
from distributions.base import Parametric, RandomVariable
from samples.base import NonParametric


def _percentile_label(p: float) -> str:
    return f"P{int(round(p * 100)):02d}"


def summarize(
    rv: RandomVariable,
    *,
    percentiles: Tuple[float, ...] = DEFAULT_PERCENTILES,
) -> Dict[str, float]:
    """Mean/median/mode/std/variance plus percentiles for one random variable."""
    row = {
        "Type": type(rv).__name__,
        "Mean": float(rv.mean()),
        "Median": float(rv.median()),
        "Mode": float(rv.mode()),
        "Std Dev": float(rv.std()),
        "Variance": float(rv.variance()),
    }
    if isinstance(rv, NonParametric):
        values = np.asarray(rv.get_data(), dtype=float)
        row["N"] = len(values)
        for p in percentiles:
            row[_percentile_label(p)] = float(np.percentile(values, p * 100))
    elif isinstance(rv, Parametric):
        for p in percentiles:
            row[_percentile_label(p)] = float(rv.icdf(p))
    return row


def summary_table(
    variables: Mapping[str, RandomVariable],
    *,
    percentiles: Tuple[float, ...] = DEFAULT_PERCENTILES,
) -> pd.DataFrame:
    """One summary row per named random variable."""
    rows = []
    for name, rv in variables.items():
        row = {"Variable": name}
        row.update(summarize(rv, percentiles=percentiles))
        rows.append(row)
    return pd.DataFrame(rows)


def frequency_frame(samples: NonParametric) -> pd.DataFrame:
    """Sorted value -> frequency table, the input a histogram renderer needs."""
    return pd.DataFrame(samples.frequency_table(), columns=["value", "frequency"])
