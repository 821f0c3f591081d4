"""
Unweighted sample set — an ordered list of values, duplicates kept in place.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from core.errors import InvalidArgumentError, OutOfRangeError, UnsupportedOperationError
from core.utils import scaled_equals

from .base import FrequencyPair, NonParametric
from .weighted import Weighted, check_frequency


class Unweighted(NonParametric):
    """
    Literal sample set.

    Usage:
        s = Unweighted([4.9, 5.1, 5.0, 5.0])
        s.append(5.2)
        s.mean(), s.std(), s.mode()   # 5.04, ~0.11, 5.0
        s.to_weighted()               # Weighted with 4 distinct values
    """

    def __init__(self, values: Iterable[float] = ()):
        super().__init__()
        self._data: List[float] = [float(v) for v in values]

    @classmethod
    def from_pairs(cls, pairs: Iterable[FrequencyPair]) -> "Unweighted":
        """Expand (value, frequency) pairs into `frequency` copies of each value."""
        data: List[float] = []
        for value, frequency in pairs:
            check_frequency(frequency)
            data.extend([float(value)] * int(frequency))
        return cls(data)

    @property
    def size(self) -> int:
        return len(self._data)

    def get(self, k: int) -> float:
        self._check_index(k)
        return self._data[k]

    def set(self, k: int, value: float) -> None:
        self._check_index(k)
        self._data[k] = float(value)

    def append(self, value: float) -> None:
        self._data.append(float(value))

    def get_data(self) -> List[float]:
        return list(self._data)

    def get_wdata(self) -> List[FrequencyPair]:
        return self.to_weighted().get_wdata()

    def to_weighted(self) -> Weighted:
        return Weighted(self._data)

    def mean(self) -> float:
        return float(np.mean(self._require_data()))

    def std(self) -> float:
        """Sample standard deviation (divisor n - 1)."""
        data = self._require_data()
        if len(data) < 2:
            raise InvalidArgumentError("Sample standard deviation needs at least 2 values.")
        return float(np.std(data, ddof=1))

    def mode(self) -> float:
        """
        Most frequent value. Runs are counted over a sorted copy; among equally
        frequent values the first one in sorted order wins.
        """
        values = sorted(self._require_data())
        best_value, best_count = values[0], 0
        run_value, run_count = values[0], 0
        for v in values:
            if scaled_equals(run_value, v):
                run_count += 1
            else:
                run_value, run_count = v, 1
            if run_count > best_count:
                best_value, best_count = run_value, run_count
        return best_value

    def mean_height(self) -> float:
        self._require_data()
        return self.size / self.to_weighted().num_pairs

    def sample_single_icdf(self, y: float) -> float:
        raise UnsupportedOperationError("Unweighted sample sets do not support icdf sampling.")

    def sample_icdf(self, n: int, values: Sequence[float]) -> np.ndarray:
        raise UnsupportedOperationError("Unweighted sample sets do not support icdf sampling.")

    def _check_index(self, k: int) -> None:
        if not 0 <= k < len(self._data):
            raise OutOfRangeError(f"Index {k} out of range for {len(self._data)} values.")
