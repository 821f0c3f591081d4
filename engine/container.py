"""
RandomVariableContainer — independent random variables plus a combining equation.

The equation takes the ordered vector of one draw per member and returns a
scalar. Members are referenced, not owned: the caller may keep using them.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from core.errors import InvalidArgumentError, SizeMismatchError, UninitializedError
from core.utils import require_positive_count
from distributions.base import RandomVariable

Equation = Callable[[Sequence[float]], float]


class RandomVariableContainer:
    """
    Ordered collection of RandomVariable members and the function combining them.

    If `arity` is declared with the equation, it is enforced whenever the
    member list or the equation changes, so a container can never hold more
    members than its equation accepts.

    Usage:
        rvc = RandomVariableContainer(lambda v: v[0] + v[1] + v[2], arity=3)
        for _ in range(3):
            rvc.add(Normal(0.0, 0.1))
        translation.sample_mc(rvc, 1000)
    """

    def __init__(
        self,
        equation: Optional[Equation] = None,
        members: Iterable[RandomVariable] = (),
        *,
        arity: Optional[int] = None,
    ):
        self._members: List[RandomVariable] = list(members)
        self._equation: Optional[Equation] = None
        self._arity: Optional[int] = None
        if equation is not None:
            self.set_equation(equation, arity=arity)
        elif arity is not None:
            raise InvalidArgumentError("An arity can only be declared together with an equation.")

    @property
    def size(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    @property
    def members(self) -> List[RandomVariable]:
        return list(self._members)

    @property
    def arity(self) -> Optional[int]:
        return self._arity

    def get_equation(self) -> Optional[Equation]:
        return self._equation

    def set_equation(self, equation: Equation, *, arity: Optional[int] = None) -> None:
        if equation is None or not callable(equation):
            raise UninitializedError("Equation function not initialized.")
        if arity is not None:
            arity = require_positive_count(arity, "arity")
            if len(self._members) > arity:
                raise SizeMismatchError(
                    f"Equation accepts {arity} values but the container already "
                    f"holds {len(self._members)} members."
                )
        self._equation = equation
        self._arity = arity

    def add(self, rv: RandomVariable) -> None:
        if self._arity is not None and len(self._members) + 1 > self._arity:
            raise SizeMismatchError(
                f"Cannot add member {len(self._members) + 1}: equation accepts {self._arity} values."
            )
        self._members.append(rv)

    def equation(self, values: Sequence[float]) -> float:
        if self._equation is None:
            raise UninitializedError("Equation function not initialized.")
        if self._arity is not None and len(values) != self._arity:
            raise SizeMismatchError(
                f"Equation expects {self._arity} values, got {len(values)}."
            )
        return float(self._equation(values))

    def check_ready(self) -> None:
        """Raise unless the container can be sampled (equation set, members match arity)."""
        if self._equation is None:
            raise UninitializedError("Equation function not initialized.")
        if not self._members:
            raise InvalidArgumentError("Container has no random variables to sample.")
        if self._arity is not None and len(self._members) != self._arity:
            raise SizeMismatchError(
                f"Equation expects {self._arity} values but the container holds "
                f"{len(self._members)} members."
            )

    def __repr__(self) -> str:
        return f"RandomVariableContainer(size={self.size}, arity={self._arity})"
