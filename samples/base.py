"""
Base class for nonparametric (sample set) distributions.

Concrete containers store their data differently (Unweighted: a literal list,
Weighted: value/frequency pairs) but share the round-robin sampling cursor,
the median rule and the frequency-table view used by renderers.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from core.errors import InvalidArgumentError
from core.utils import require_positive_count
from distributions.base import RandomVariable

FrequencyPair = Tuple[float, int]


class NonParametric(RandomVariable):
    """
    Interface for a distribution represented directly by stored samples.

    Sampling walks the stored (virtual, for Weighted) sequence round-robin
    through a cursor owned by the instance. The cursor keeps advancing
    across calls and is not safe to share between threads.
    """

    def __init__(self):
        self._cursor = 0

    @property
    def size(self) -> int:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.size

    def append(self, value: float) -> None:
        raise NotImplementedError

    def get(self, k: int) -> float:
        raise NotImplementedError

    def get_data(self) -> List[float]:
        """All values as a flat (unweighted) list."""
        raise NotImplementedError

    def get_wdata(self) -> List[FrequencyPair]:
        """All values as (value, frequency) pairs."""
        raise NotImplementedError

    def mean_height(self) -> float:
        """Mean frequency per distinct value (total count / distinct values)."""
        raise NotImplementedError

    def frequency_table(self) -> List[FrequencyPair]:
        """(value, frequency) pairs sorted by value."""
        return sorted(self.get_wdata(), key=lambda pair: pair[0])

    def median(self) -> float:
        values = np.sort(np.asarray(self._require_data(), dtype=float))
        mid = len(values) // 2
        if len(values) % 2 == 1:
            return float(values[mid])
        return float((values[mid - 1] + values[mid]) / 2)

    def reset_cursor(self) -> None:
        """Restart round-robin sampling from the first stored value."""
        self._cursor = 0

    def sample_single(self) -> float:
        size = self.size
        if size == 0:
            raise InvalidArgumentError(f"Cannot sample from an empty {type(self).__name__}.")
        value = self.get(self._cursor % size)
        self._cursor += 1
        return value

    def sample(self, n: int) -> np.ndarray:
        n = require_positive_count(n)
        return np.array([self.sample_single() for _ in range(n)], dtype=float)

    def _require_data(self) -> Sequence[float]:
        data = self.get_data()
        if not data:
            raise InvalidArgumentError(
                f"Statistics are undefined for an empty {type(self).__name__}."
            )
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"
