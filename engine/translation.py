"""
Translation between representations, and multi-variable sampling.

  sample()     parametric    -> nonparametric  (draw n values)
  fit()        nonparametric -> parametric     (method of moments)
  sample_mc()  container     -> nonparametric  (plain Monte Carlo)
  sample_lh()  container     -> nonparametric  (Latin Hypercube)

Target types are passed as classes, e.g. sample(dist, 500, target=Weighted)
or fit(samples, family=Lognormal).
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Type, TypeVar, Union

import numpy as np

from core.utils import require_positive_count
from distributions.base import Parametric
from distributions.normal import Normal
from samples.base import NonParametric
from samples.unweighted import Unweighted

from .container import RandomVariableContainer

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=NonParametric)
P = TypeVar("P", bound=Parametric)

RngLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def sample(parametric: Parametric, n: int, target: Type[N] = Unweighted) -> N:
    """Draw n values from a parametric distribution into a `target` sample set."""
    n = require_positive_count(n)
    values = parametric.sample(n)
    logger.debug("Sampled %d values from %r into %s", n, parametric, target.__name__)
    return target(values)


def fit(nonparametric: NonParametric, family: Type[P] = Normal) -> P:
    """
    Fit a parametric family to a sample set from its (mean, mode, std) summary.

    Pure method of moments: no likelihood maximisation.
    """
    stats = nonparametric.stats()
    fitted = family.from_statistics(stats)
    logger.debug("Fitted %r to %r (mean=%g, std=%g)", fitted, nonparametric, stats.mean, stats.std)
    return fitted


def sample_mc(
    container: RandomVariableContainer,
    n: int,
    target: Type[N] = Unweighted,
) -> N:
    """
    Plain Monte Carlo: each iteration draws one value per member (in stored
    order), applies the container's equation and keeps the scalar result.
    """
    n = require_positive_count(n)
    container.check_ready()
    members = container.members

    results = np.empty(n, dtype=float)
    for j in range(n):
        args = [rv.sample_single() for rv in members]
        results[j] = container.equation(args)

    logger.debug("Monte Carlo: %d samples over %d variables", n, len(members))
    return target(results)


def latin_hypercube(
    n_vars: int,
    n: int,
    rng: RngLike = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Latin Hypercube design on the unit cube.

    Returns
    -------
    (strata, probabilities), both shaped (n_vars, n).
    strata[i] is a random permutation of 0..n-1, so each variable hits every
    equal-probability stratum exactly once. probabilities[i, j] is
    (strata[i, j] + u) / n with u ~ Uniform[0, 1), i.e. jittered inside the stratum.
    """
    n_vars = require_positive_count(n_vars, "n_vars")
    n = require_positive_count(n)
    rng = np.random.default_rng(rng)

    u = rng.random((n_vars, n))
    strata = np.vstack([rng.permutation(n) for _ in range(n_vars)])
    probabilities = (strata + u) / n
    return strata, probabilities


def sample_lh(
    container: RandomVariableContainer,
    n: int,
    target: Type[N] = Unweighted,
    rng: RngLike = None,
) -> N:
    """
    Latin Hypercube sampling: stratified probabilities are pushed through each
    member's inverse CDF, then combined per sample by the container's equation.

    Every member must support icdf sampling (parametric families, Weighted).
    """
    n = require_positive_count(n)
    container.check_ready()
    members = container.members

    _, probabilities = latin_hypercube(len(members), n, rng)

    results = np.empty(n, dtype=float)
    for j in range(n):
        args = [rv.sample_single_icdf(probabilities[i, j]) for i, rv in enumerate(members)]
        results[j] = container.equation(args)

    logger.debug("Latin Hypercube: %d samples over %d variables", n, len(members))
    return target(results)
