from __future__ import annotations

import math

import numpy as np

from .errors import DomainError, InvalidArgumentError

# Tolerance used to treat two sample values as the same value.
EQUALITY_TOLERANCE = float(np.finfo(np.float64).eps) * 2


def scaled_equals(a: float, b: float) -> bool:
    """
    True if a and b differ by less than twice the float64 machine epsilon.

    The tolerance is absolute, so values of large magnitude that are
    "equal" up to rounding may still compare unequal.
    """
    return abs(a - b) < EQUALITY_TOLERANCE


def checked_square_root(x: float) -> float:
    """Square root that raises DomainError instead of returning NaN for x < 0."""
    if x < 0:
        raise DomainError(f"Square root cannot be taken of a negative number ({x}).")
    return math.sqrt(x)


def require_positive_count(n, name: str = "n") -> int:
    """Validate a sample count: an integer >= 1."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(n).__name__}.")
    if n < 1:
        raise InvalidArgumentError(f"{name} must be at least 1, got {n}.")
    return int(n)
