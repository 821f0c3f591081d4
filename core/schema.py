from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Statistics:
    """
    Representation-agnostic summary of a distribution.

    Used to move information from a nonparametric sample set into a
    parametric constructor (method-of-moments fit). std >= 0 is expected
    but enforced by the consuming constructor, not here.
    """

    mean: float
    mode: float
    std: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.mean, self.mode, self.std)
