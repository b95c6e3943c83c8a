"""Exact value frequencies for categorical columns."""

from collections import Counter
from typing import Any, Dict, List, Optional, Tuple

from .base import StatCollector


class CategoricalFreq(StatCollector):
    """
    Exact occurrence count per distinct value, plus length bounds.

    Values are compared by their string form. Empty strings count toward the
    total but are kept out of the frequency table and the length bounds.
    """

    def __init__(self):
        super().__init__()
        self.counts: Counter = Counter()
        self.non_empty_count = 0
        self.min_length: Optional[int] = None
        self.max_length: Optional[int] = None

    def push(self, value: Any) -> None:
        self.total_count += 1
        if value is None:
            self.null_count += 1
            return

        text = value if isinstance(value, str) else str(value)
        length = len(text)
        if length == 0:
            return

        self.counts[text] += 1
        self.non_empty_count += 1
        if self.min_length is None or length < self.min_length:
            self.min_length = length
        if self.max_length is None or length > self.max_length:
            self.max_length = length

    def count(self) -> int:
        return self.non_empty_count

    @property
    def distinct_count(self) -> int:
        return len(self.counts)

    def top_n(self, n: int, want_least: bool = False) -> Tuple[List[str], List[int]]:
        """
        Select the n most (or least) frequent values.

        Values are ordered by descending count; equal counts are ordered
        lexicographically so repeated runs give the same report.

        Args:
            n: Number of values wanted, clamped to the number of distinct values
            want_least: Return the tail of the ordering instead of the head

        Returns:
            Tuple of parallel lists (values, counts)
        """
        ordered = sorted(self.counts.items(), key=lambda item: (-item[1], item[0]))
        n = max(0, min(n, len(ordered)))
        if want_least:
            selected = ordered[len(ordered) - n:]
        else:
            selected = ordered[:n]
        return [value for value, _ in selected], [count for _, count in selected]

    def frequencies(self, n: int, least: bool = False) -> Tuple[List[str], List[int]]:
        return self.top_n(n, least)

    def summary(self) -> str:
        if self.all_null:
            return 'ALL NULL'
        if self.non_empty_count > 0:
            return self._null_prefix() + f"length min: {self.min_length}, max: {self.max_length}"
        return self._null_prefix() + 'EMPTY'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'count': self.non_empty_count,
            'null_count': self.null_count,
            'total_count': self.total_count,
            'distinct_count': self.distinct_count,
            'min_length': self.min_length,
            'max_length': self.max_length,
        }
