"""
Base classes for distributions.

RandomVariable is the capability set shared by every representation
(parametric families and nonparametric sample sets). Parametric adds the
two-parameter state, pdf/cdf/icdf and a per-instance random generator.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from core.config import DEFAULT_MU, DEFAULT_SIGMA
from core.errors import InvalidArgumentError, InvalidParameterError, SizeMismatchError
from core.schema import Statistics
from core.utils import scaled_equals

logger = logging.getLogger(__name__)

# icdf(0) / icdf(1) would be -inf / +inf; these are evaluated instead.
LOWER_PROBABILITY = float(np.finfo(np.float64).tiny)
UPPER_PROBABILITY = float(np.nextafter(1.0, 0.0))


class RandomVariable:
    """Interface for a scalar quantity with uncertainty (parametric or sampled)."""

    def mean(self) -> float:
        raise NotImplementedError

    def median(self) -> float:
        raise NotImplementedError

    def mode(self) -> float:
        raise NotImplementedError

    def std(self) -> float:
        raise NotImplementedError

    def variance(self) -> float:
        sd = self.std()
        return sd * sd

    def stats(self) -> Statistics:
        """Compact (mean, mode, std) summary used by fitting."""
        return Statistics(mean=self.mean(), mode=self.mode(), std=self.std())

    def sample_single(self) -> float:
        raise NotImplementedError

    def sample(self, n: int) -> np.ndarray:
        raise NotImplementedError

    def sample_single_icdf(self, y: float) -> float:
        raise NotImplementedError

    def sample_icdf(self, n: int, values: Sequence[float]) -> np.ndarray:
        raise NotImplementedError


class Parametric(RandomVariable):
    """
    Closed-form distribution defined by a location `mu` and a scale `sigma`.

    sigma > 0 at all times: assigning a non-positive sigma raises
    InvalidParameterError and keeps the previous value. Constructors raise
    the same error instead of producing a half-initialised object.

    Sampling uses a numpy Generator owned by the instance; pass `seed` for
    reproducible draws.
    """

    family = "Parametric"

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: float = DEFAULT_SIGMA,
        *,
        seed=None,
    ):
        self.mu = float(mu)
        self._sigma = DEFAULT_SIGMA
        self.sigma = sigma
        self.rng = np.random.default_rng(seed)

    @property
    def sigma(self) -> float:
        return self._sigma

    @sigma.setter
    def sigma(self, value: float) -> None:
        value = float(value)
        if not value > 0:
            raise InvalidParameterError(
                f"Sigma parameter of a {self.family} distribution cannot be zero "
                f"or negative (got {value})."
            )
        self._sigma = value

    @classmethod
    def from_params(cls, params: Sequence[float], *, seed: Optional[int] = None):
        """Build from a [mu, sigma] parameter vector."""
        params = list(params)
        if len(params) != 2:
            raise SizeMismatchError(
                f"{cls.family} can only be created from a 2-element parameter "
                f"vector, got {len(params)} elements."
            )
        return cls(params[0], params[1], seed=seed)

    @classmethod
    def from_statistics(cls, stats: Statistics, *, seed: Optional[int] = None):
        raise NotImplementedError

    def get_params(self) -> List[float]:
        return [self.mu, self.sigma]

    def reseed(self, seed=None) -> None:
        """Replace the generator; `seed` is anything numpy.random.default_rng accepts."""
        self.rng = np.random.default_rng(seed)

    def pdf(self, x: float) -> float:
        raise NotImplementedError

    def cdf(self, x: float) -> float:
        raise NotImplementedError

    def icdf(self, y: float) -> float:
        raise NotImplementedError

    def sample_single(self) -> float:
        return float(self.sample(1)[0])

    def sample_single_icdf(self, y: float) -> float:
        return self.icdf(y)

    def sample_icdf(self, n: int, values: Sequence[float]) -> np.ndarray:
        values = list(values)
        if n != len(values):
            raise SizeMismatchError(
                f"Size of value vector ({len(values)}) must equal the sample count ({n})."
            )
        return np.array([self.icdf(v) for v in values], dtype=float)

    def _checked_probability(self, y: float) -> float:
        """Validate an icdf input and move the 0/1 endpoints inside the open interval."""
        y = float(y)
        if not 0.0 <= y <= 1.0:
            raise InvalidArgumentError(
                f"The probability passed to icdf() must lie in [0, 1], got {y}."
            )
        if scaled_equals(y, 0.0):
            logger.warning(
                "%s.icdf(0) is -inf; evaluating at the smallest positive double (%g) instead.",
                self.family, LOWER_PROBABILITY,
            )
            return LOWER_PROBABILITY
        if scaled_equals(y, 1.0):
            logger.warning(
                "%s.icdf(1) is +inf; evaluating at the largest double below one instead.",
                self.family,
            )
            return UPPER_PROBABILITY
        return y

    def __repr__(self) -> str:
        return f"{self.family}(mu={self.mu:.6g}, sigma={self.sigma:.6g})"
