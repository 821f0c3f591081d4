"""
Sampling configuration and library-wide defaults.
Distribution formulas live in distributions/; this module holds settings only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

# Parametric defaults (used by the no-argument constructors)
DEFAULT_MU = 0.0
DEFAULT_SIGMA = 0.1

# Monte Carlo / Latin Hypercube sample size
DEFAULT_N_SAMPLES = 1000

# Percentiles reported by reporting.summary
DEFAULT_PERCENTILES = (0.05, 0.25, 0.50, 0.75, 0.95)


@dataclass(frozen=True)
class SamplingConfig:
    n_samples: int = DEFAULT_N_SAMPLES
    seed: Optional[int] = None  # None -> fresh OS entropy on every run

    # "mc" = plain Monte Carlo, "lh" = Latin Hypercube
    method: Literal["mc", "lh"] = "mc"
