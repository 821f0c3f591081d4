"""
Core package — error kinds, configuration, numeric primitives and the
Statistics summary type. No distribution logic lives here.
"""

from .config import SamplingConfig
from .errors import (
    DomainError,
    InvalidArgumentError,
    InvalidParameterError,
    NotFoundError,
    OutOfRangeError,
    RandomVariableError,
    SizeMismatchError,
    UninitializedError,
    UnsupportedOperationError,
)
from .schema import Statistics
from .utils import checked_square_root, require_positive_count, scaled_equals

__all__ = [
    "SamplingConfig",
    "Statistics",
    "RandomVariableError",
    "InvalidParameterError",
    "InvalidArgumentError",
    "SizeMismatchError",
    "OutOfRangeError",
    "NotFoundError",
    "UnsupportedOperationError",
    "UninitializedError",
    "DomainError",
    "scaled_equals",
    "checked_square_root",
    "require_positive_count",
]
