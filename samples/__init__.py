"""
Nonparametric distributions — uncertainty represented by stored samples.

  1. unweighted.py — literal value list
  2. weighted.py   — distinct values with integer frequencies
"""

from .base import FrequencyPair, NonParametric
from .unweighted import Unweighted
from .weighted import Weighted

__all__ = [
    "FrequencyPair",
    "NonParametric",
    "Unweighted",
    "Weighted",
]
