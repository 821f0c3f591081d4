"""
Standard normal quantile function.

Wichura, M. J. (1988) Algorithm AS 241: The percentage points of the normal
distribution. Applied Statistics 37(3), 477-484. Accurate to about 1 part
in 10**16.

Three rational approximations:
  - central region |p - 0.5| <= 0.425, polynomial in r = 0.180625 - q^2
  - moderate tail, r = sqrt(-ln(min(p, 1 - p))) <= 5
  - extreme tail, r > 5 (min(p, 1 - p) < exp(-25))
"""

from __future__ import annotations

import math
from typing import Sequence

from core.errors import InvalidArgumentError
from core.utils import checked_square_root

SPLIT_CENTRAL = 0.425
SPLIT_TAIL = 5.0
CENTRAL_CONST = 0.180625  # 0.425 ** 2
TAIL_SHIFT_MODERATE = 1.6
TAIL_SHIFT_EXTREME = 5.0

# Coefficients in ascending powers.
_A = (
    3.387132872796366608,
    133.14166789178437745,
    1971.5909503065514427,
    13731.693765509461125,
    45921.953931549871457,
    67265.770927008700853,
    33430.575583588128105,
    2509.0809287301226727,
)
_B = (
    1.0,
    42.313330701600911252,
    687.1870074920579083,
    5394.1960214247511077,
    21213.794301586595867,
    39307.89580009271061,
    28729.085735721942674,
    5226.495278852854561,
)
_C = (
    1.42343711074968357734,
    4.6303378461565452959,
    5.7694972214606914055,
    3.64784832476320460504,
    1.27045825245236838258,
    0.24178072517745061177,
    0.0227238449892691845833,
    7.7454501427834140764e-4,
)
_D = (
    1.0,
    2.05319162663775882187,
    1.6763848301838038494,
    0.68976733498510000455,
    0.14810397642748007459,
    0.0151986665636164571966,
    5.475938084995344946e-4,
    1.05075007164441684324e-9,
)
_E = (
    6.6579046435011037772,
    5.4637849111641143699,
    1.7848265399172913358,
    0.29656057182850489123,
    0.026532189526576123093,
    0.0012426609473880784386,
    2.71155556874348757815e-5,
    2.01033439929228813265e-7,
)
_F = (
    1.0,
    0.59983220655588793769,
    0.13692988092273580531,
    0.0148753612908506148525,
    7.868691311456132591e-4,
    1.8463183175100546818e-5,
    1.4215117583164458887e-7,
    2.04426310338993978564e-15,
)


def _horner(coefficients: Sequence[float], x: float) -> float:
    result = 0.0
    for c in reversed(coefficients):
        result = result * x + c
    return result


def normal_quantile(p: float) -> float:
    """
    Return z such that P(Z <= z) = p for a standard normal Z.

    p must lie in the open interval (0, 1); callers map the endpoints
    themselves (see Parametric._checked_probability).
    """
    p = float(p)
    if not 0.0 < p < 1.0:
        raise InvalidArgumentError(f"normal_quantile() needs 0 < p < 1, got {p}.")

    q = p - 0.5
    if abs(q) <= SPLIT_CENTRAL:
        r = CENTRAL_CONST - q * q
        return q * _horner(_A, r) / _horner(_B, r)

    r = p if q < 0 else 1.0 - p
    r = checked_square_root(-math.log(r))
    if r <= SPLIT_TAIL:
        r -= TAIL_SHIFT_MODERATE
        value = _horner(_C, r) / _horner(_D, r)
    else:
        r -= TAIL_SHIFT_EXTREME
        value = _horner(_E, r) / _horner(_F, r)
    return -value if q < 0 else value
