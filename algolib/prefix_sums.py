"""Prefix sums answering range-sum queries in constant time."""

from __future__ import annotations

from itertools import accumulate
from typing import Any, Iterable


class PrefixSums:
    """Sums of half-open ranges of a fixed sequence."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._pref = list(accumulate(values, initial=0))

    def query(self, l: int, r: int) -> Any:
        """Sum of the elements with indices in [l, r)."""
        if l > r:
            raise ValueError(f"range start {l} is after its end {r}")
        if l < 0 or r >= len(self._pref):
            raise IndexError(f"range [{l}, {r}) is out of bounds")
        return self._pref[r] - self._pref[l]

    def __len__(self) -> int:
        return len(self._pref) - 1