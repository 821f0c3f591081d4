"""
Lognormal distribution: X = exp(Y) with Y ~ Normal(mu, sigma).

mu and sigma are log-space parameters. The inverse CDF reuses the AS241
normal quantile and exponentiates it.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from scipy.special import erf

from core.errors import DomainError
from core.schema import Statistics
from core.utils import checked_square_root, require_positive_count

from .base import Parametric
from .quantile import normal_quantile


def _exp(x: float) -> float:
    """exp(x), saturating to inf instead of raising OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


class Lognormal(Parametric):
    family = "Lognormal"

    @classmethod
    def from_statistics(cls, stats: Statistics, *, seed: Optional[int] = None) -> "Lognormal":
        """
        Moment-matching reparameterisation:
            mu    = ln(mean / sqrt(1 + std^2 / mean^2))
            sigma = sqrt(ln(1 + std^2 / mean^2))
        """
        if stats.mean <= 0:
            raise DomainError(
                f"A Lognormal fit needs a positive mean, got {stats.mean}."
            )
        cv = stats.std / stats.mean
        ratio = 1.0 + cv * cv
        if not math.isfinite(ratio):
            raise DomainError(
                f"A Lognormal fit needs a finite std/mean ratio, got {stats.std}/{stats.mean}."
            )
        mu = math.log(stats.mean) - 0.5 * math.log(ratio)
        sigma = checked_square_root(math.log(ratio))
        return cls(mu, sigma, seed=seed)

    def mean(self) -> float:
        return _exp(self.mu + self.sigma ** 2 / 2)

    def median(self) -> float:
        return _exp(self.mu)

    def mode(self) -> float:
        return _exp(self.mu - self.sigma ** 2)

    def variance(self) -> float:
        s2 = self.sigma ** 2
        try:
            return math.expm1(s2) * math.exp(2 * self.mu + s2)
        except OverflowError:
            # log space, so a huge factor times an underflowed one is not inf * 0
            return _exp(2 * self.mu + 2 * s2 + math.log(-math.expm1(-s2)))

    def std(self) -> float:
        return checked_square_root(self.variance())

    def pdf(self, x: float) -> float:
        if x <= 0:
            raise DomainError(f"Lognormal.pdf() needs x > 0, got {x}.")
        z = (math.log(x) - self.mu) / self.sigma
        return math.exp(-0.5 * z * z) / (x * self.sigma * math.sqrt(2 * math.pi))

    def cdf(self, x: float) -> float:
        if x <= 0:
            raise DomainError(f"Lognormal.cdf() needs x > 0, got {x}.")
        return 0.5 + 0.5 * float(erf((math.log(x) - self.mu) / (self.sigma * math.sqrt(2))))

    def icdf(self, y: float) -> float:
        y = self._checked_probability(y)
        return _exp(normal_quantile(y) * self.sigma + self.mu)

    def sample(self, n: int) -> np.ndarray:
        n = require_positive_count(n)
        return self.rng.lognormal(self.mu, self.sigma, size=n)
