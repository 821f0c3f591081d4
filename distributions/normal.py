"""
Normal (Gaussian) distribution N(mu, sigma).

The inverse CDF uses the AS241 quantile (distributions/quantile.py); every
other statistic is closed form.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from scipy.special import erf

from core.schema import Statistics
from core.utils import require_positive_count

from .base import Parametric
from .quantile import normal_quantile


class Normal(Parametric):
    """
    Normal distribution parameterised by mean `mu` and standard deviation `sigma`.

    Usage:
        dist = Normal(5.0, 0.5, seed=42)
        dist.icdf(0.975)   # ~5.98
        dist.sample(1000)  # numpy array of draws
    """

    family = "Normal"

    @classmethod
    def from_statistics(cls, stats: Statistics, *, seed: Optional[int] = None) -> "Normal":
        return cls(stats.mean, stats.std, seed=seed)

    def mean(self) -> float:
        return self.mu

    def median(self) -> float:
        return self.mu

    def mode(self) -> float:
        return self.mu

    def std(self) -> float:
        return self.sigma

    def pdf(self, x: float) -> float:
        var = self.variance()
        return math.exp(-((x - self.mu) ** 2) / (2 * var)) / math.sqrt(2 * math.pi * var)

    def cdf(self, x: float) -> float:
        return 0.5 + 0.5 * float(erf((x - self.mu) / (self.sigma * math.sqrt(2))))

    def icdf(self, y: float) -> float:
        y = self._checked_probability(y)
        return normal_quantile(y) * self.sigma + self.mu

    def sample(self, n: int) -> np.ndarray:
        n = require_positive_count(n)
        return self.rng.normal(self.mu, self.sigma, size=n)
