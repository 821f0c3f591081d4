"""
Error kinds raised across the library.

Each error also derives from the closest builtin exception so callers can
catch either the library type or the usual ValueError / IndexError / KeyError.
"""

from __future__ import annotations


class RandomVariableError(Exception):
    """Base class for every error raised by this library."""


class InvalidParameterError(RandomVariableError, ValueError):
    """A distribution parameter is outside its valid domain (e.g. sigma <= 0)."""


class InvalidArgumentError(RandomVariableError, ValueError):
    """An argument to an operation is invalid (probability outside [0, 1], bad count, ...)."""


class SizeMismatchError(InvalidArgumentError):
    """A value vector does not have the length the operation expects."""


class OutOfRangeError(RandomVariableError, IndexError):
    """Indexed access beyond the bounds of a sample set."""


class NotFoundError(RandomVariableError, KeyError):
    """A value is not present in a weighted sample set."""


class UnsupportedOperationError(RandomVariableError, NotImplementedError):
    """The representation does not support the requested operation."""


class UninitializedError(RandomVariableError, RuntimeError):
    """A required component (e.g. the combining equation) was never set."""


class DomainError(RandomVariableError, ValueError):
    """A mathematical function was evaluated outside its domain."""
