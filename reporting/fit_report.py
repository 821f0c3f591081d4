"""
Compare parametric fits of one sample set.

When the generating family is unknown, fit every candidate and see which
describes the data best. Each candidate is fitted by method of moments
(engine.translation.fit) and scored with the Kolmogorov-Smirnov statistic
against the samples: smaller is better.
"""

from __future__ import annotations

from typing import Iterable, Optional, Type

import numpy as np
import pandas as pd
from scipy.stats import kstest

from core.errors import DomainError, RandomVariableError
from distributions.base import Parametric
from distributions.lognormal import Lognormal
from distributions.normal import Normal
from engine.translation import fit
from samples.base import NonParametric

DEFAULT_FAMILIES = (Normal, Lognormal)


def _cdf_values(dist: Parametric, xs: np.ndarray) -> np.ndarray:
    out = np.empty(len(xs), dtype=float)
    for i, x in enumerate(xs):
        try:
            out[i] = dist.cdf(x)
        except DomainError:
            # Outside the support (lognormal, x <= 0): no probability mass below x.
            out[i] = 0.0
    return out


def _ks_test(dist: Parametric, data: np.ndarray):
    return kstest(data, lambda xs: _cdf_values(dist, np.atleast_1d(xs)))


def compare_fits(
    samples: NonParametric,
    families: Iterable[Type[Parametric]] = DEFAULT_FAMILIES,
) -> pd.DataFrame:
    """
    Fit each family to `samples` and tabulate parameters, moments and KS score.

    A family that cannot be fitted (e.g. Lognormal to data with a
    non-positive mean) gets a row with its error message and NaN scores.
    Rows are sorted by KS statistic, best fit first.
    """
    data = np.asarray(samples.get_data(), dtype=float)
    sample_mean = samples.mean()
    sample_std = samples.std()

    rows = []
    for family in families:
        row = {
            "Family": family.family,
            "mu": np.nan,
            "sigma": np.nan,
            "Fitted Mean": np.nan,
            "Sample Mean": sample_mean,
            "Fitted Std": np.nan,
            "Sample Std": sample_std,
            "KS Statistic": np.nan,
            "KS p-value": np.nan,
            "Error": None,
        }
        try:
            fitted = fit(samples, family)
        except RandomVariableError as exc:
            row["Error"] = str(exc)
            rows.append(row)
            continue

        result = _ks_test(fitted, data)
        row.update({
            "mu": fitted.mu,
            "sigma": fitted.sigma,
            "Fitted Mean": fitted.mean(),
            "Fitted Std": fitted.std(),
            "KS Statistic": float(result.statistic),
            "KS p-value": float(result.pvalue),
        })
        rows.append(row)

    table = pd.DataFrame(rows)
    return table.sort_values("KS Statistic", na_position="last").reset_index(drop=True)


def best_fit(
    samples: NonParametric,
    families: Iterable[Type[Parametric]] = DEFAULT_FAMILIES,
) -> Optional[Parametric]:
    """The fitted distribution with the smallest KS statistic, or None if no family fits."""
    data = np.asarray(samples.get_data(), dtype=float)
    best, best_score = None, np.inf
    for family in families:
        try:
            fitted = fit(samples, family)
        except RandomVariableError:
            continue
        score = _ks_test(fitted, data).statistic
        if score < best_score:
            best, best_score = fitted, score
    return best
