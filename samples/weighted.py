"""
Weighted sample set — distinct values with positive integer frequencies.

Invariants:
  - values are pairwise distinct under core.utils.scaled_equals
  - the sum of frequencies equals the cached total count (`size`)
  - appending an existing value increments its frequency
Every mutator validates before it touches the pairs, so a failed call leaves
the set unchanged.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from core.errors import InvalidArgumentError, NotFoundError, OutOfRangeError, SizeMismatchError
from core.utils import scaled_equals

from .base import FrequencyPair, NonParametric


def check_frequency(frequency) -> int:
    if isinstance(frequency, bool) or not isinstance(frequency, (int, np.integer)):
        raise InvalidArgumentError(
            f"Frequency must be an integer, got {type(frequency).__name__}."
        )
    if frequency < 1:
        raise InvalidArgumentError(f"Frequency must be positive, got {frequency}.")
    return int(frequency)


class Weighted(NonParametric):
    """
    Frequency-compressed sample set.

    Built from raw values it sorts them and run-length encodes equal values:
        Weighted([5, 1, 1, 3]).get_wdata()  # [(1.0, 2), (3.0, 1), (5.0, 1)]

    Positional access (`get`) treats the pairs as a virtual expanded
    sequence in pair order.
    """

    def __init__(self, values: Iterable[float] = ()):
        super().__init__()
        self._pairs: List[Tuple[float, int]] = []
        ordered = sorted(float(v) for v in values)
        for v in ordered:
            if self._pairs and scaled_equals(self._pairs[-1][0], v):
                self._pairs[-1] = (self._pairs[-1][0], self._pairs[-1][1] + 1)
            else:
                self._pairs.append((v, 1))
        self._size = len(ordered)

    @classmethod
    def from_pairs(cls, pairs: Iterable[FrequencyPair]) -> "Weighted":
        """Build from (value, frequency) pairs; repeated values are merged."""
        weighted = cls()
        for pair in pairs:
            weighted.append_pair(pair)
        return weighted

    # --- accessors ---

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_pairs(self) -> int:
        return len(self._pairs)

    def get(self, k: int) -> float:
        """k-th value of the virtual expanded sequence (walks cumulative frequency)."""
        if not 0 <= k < self._size:
            raise OutOfRangeError(f"Index {k} out of range for {self._size} values.")
        running = 0
        for value, frequency in self._pairs:
            running += frequency
            if k < running:
                return value
        raise OutOfRangeError(f"Index {k} out of range for {self._size} values.")

    def get_pair(self, k: int) -> FrequencyPair:
        self._check_pair_index(k)
        return self._pairs[k]

    def set(self, k: int, pair: FrequencyPair) -> None:
        """Replace the k-th pair, e.g. set(0, (7.0, 2))."""
        self._check_pair_index(k)
        value, frequency = float(pair[0]), check_frequency(pair[1])
        other = self._find_index(value)
        if other is not None and other != k:
            raise InvalidArgumentError(
                f"Value {value} already present at pair index {other}."
            )
        self._size += frequency - self._pairs[k][1]
        self._pairs[k] = (value, frequency)

    def get_freq(self, value: float) -> int:
        idx = self._find_index(value)
        if idx is None:
            raise NotFoundError(f"Value {value} not found in the data set.")
        return self._pairs[idx][1]

    def set_freq(self, value: float, frequency: int) -> None:
        frequency = check_frequency(frequency)
        idx = self._find_index(value)
        if idx is None:
            raise NotFoundError(f"Value {value} not found in the data set.")
        old_value, old_frequency = self._pairs[idx]
        self._size += frequency - old_frequency
        self._pairs[idx] = (old_value, frequency)

    def append(self, value: float) -> None:
        self.append_pair((value, 1))

    def append_pair(self, pair: FrequencyPair) -> None:
        """Add a (value, frequency) pair; an existing value accumulates the frequency."""
        value, frequency = float(pair[0]), check_frequency(pair[1])
        idx = self._find_index(value)
        if idx is None:
            self._pairs.append((value, frequency))
        else:
            existing_value, existing_frequency = self._pairs[idx]
            self._pairs[idx] = (existing_value, existing_frequency + frequency)
        self._size += frequency

    def get_data(self) -> List[float]:
        data: List[float] = []
        for value, frequency in self._pairs:
            data.extend([value] * frequency)
        return data

    def get_wdata(self) -> List[FrequencyPair]:
        return list(self._pairs)

    def to_unweighted(self):
        from .unweighted import Unweighted

        return Unweighted(self.get_data())

    # --- calculations ---

    def mean(self) -> float:
        self._require_data()
        return sum(v * f for v, f in self._pairs) / self._size

    def std(self) -> float:
        """Frequency-weighted standard deviation over the expanded sequence (divisor n)."""
        return float(np.std(self._require_data()))

    def mode(self) -> float:
        """Value with the highest frequency; the first such pair in storage order wins."""
        self._require_data()
        best_value, best_frequency = self._pairs[0]
        for value, frequency in self._pairs[1:]:
            if frequency > best_frequency:
                best_value, best_frequency = value, frequency
        return best_value

    def mean_height(self) -> float:
        self._require_data()
        return self._size / len(self._pairs)

    # --- inverse-CDF sampling ---

    def sample_single_icdf(self, y: float) -> float:
        """
        Empirical quantile: the smallest value whose cumulative share of the
        total count reaches y. y = 0 maps to the minimum, y = 1 to the maximum.
        """
        y = float(y)
        if not 0.0 <= y <= 1.0:
            raise InvalidArgumentError(
                f"The probability passed to icdf sampling must lie in [0, 1], got {y}."
            )
        self._require_data()
        target = y * self._size
        running = 0
        ordered = sorted(self._pairs, key=lambda pair: pair[0])
        for value, frequency in ordered:
            running += frequency
            if running >= target:
                return value
        return ordered[-1][0]

    def sample_icdf(self, n: int, values: Sequence[float]) -> np.ndarray:
        values = list(values)
        if n != len(values):
            raise SizeMismatchError(
                f"Size of value vector ({len(values)}) must equal the sample count ({n})."
            )
        return np.array([self.sample_single_icdf(v) for v in values], dtype=float)

    # --- helpers ---

    def _find_index(self, value: float) -> Optional[int]:
        for idx, (existing, _) in enumerate(self._pairs):
            if scaled_equals(existing, value):
                return idx
        return None

    def _check_pair_index(self, k: int) -> None:
        if not 0 <= k < len(self._pairs):
            raise OutOfRangeError(f"Pair index {k} out of range for {len(self._pairs)} pairs.")
