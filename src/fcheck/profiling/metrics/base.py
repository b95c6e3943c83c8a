"""Common interface for per-column statistic collectors."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple


class StatCollector(ABC):
    """Online aggregator fed one value at a time by the profiler."""

    def __init__(self):
        self.total_count = 0
        self.null_count = 0

    @abstractmethod
    def push(self, value: Any) -> None:
        """Add one value (``None`` is a null) to the running statistics."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of values that contributed to the statistics."""
        pass

    @abstractmethod
    def summary(self) -> str:
        """One-line free-text description for the coverage report."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Raw statistics, JSON serialisable."""
        pass

    def frequencies(self, n: int, least: bool = False) -> Tuple[List[str], List[int]]:
        """Top-N values with their counts; only categorical collectors have them."""
        raise NotImplementedError(f"{self.__class__.__name__} does not track value frequencies")

    @property
    def all_null(self) -> bool:
        return self.total_count > 0 and self.null_count == self.total_count

    def _null_prefix(self) -> str:
        if self.null_count > 0:
            return f"{self.null_count} NULL "
        return ''
