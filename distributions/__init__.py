"""
Parametric distributions — uncertainty described by closed-form families.

  1. base.py      — RandomVariable contract + Parametric (mu, sigma) base
  2. quantile.py  — AS241 standard normal quantile
  3. normal.py    — Normal(mu, sigma)
  4. lognormal.py — Lognormal(mu, sigma), built on the normal quantile
"""

from .base import Parametric, RandomVariable
from .lognormal import Lognormal
from .normal import Normal
from .quantile import normal_quantile

__all__ = [
    "RandomVariable",
    "Parametric",
    "Normal",
    "Lognormal",
    "normal_quantile",
]
