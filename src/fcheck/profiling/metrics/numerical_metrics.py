"""Running statistics for numerical columns."""

import math
from decimal import Decimal
from typing import Any, Dict, Optional

from .base import StatCollector
from ...exceptions import ContractViolationError


class NumericStats(StatCollector):
    """
    Count, mean, variance, min and max over a stream of numbers.

    Uses Welford's online update so the whole column never has to be held in
    memory and the variance does not suffer from cancellation error.
    """

    def __init__(self):
        super().__init__()
        self.n = 0
        self.mean = 0.0
        self._s = 0.0
        self.min: Optional[float] = None
        self.max: Optional[float] = None

    @staticmethod
    def _to_float(value: Any) -> float:
        # bool is an int subclass but never a numeric column value
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise ContractViolationError(
                f"unexpected type: {type(value).__name__} ({value!r}) is not numeric"
            )
        return float(value)

    def push(self, value: Any) -> None:
        """
        Add a value to the running statistics.

        Args:
            value: int, float or Decimal; None counts as null

        Raises:
            ContractViolationError: If the value is not numeric
        """
        self.total_count += 1
        if value is None:
            self.null_count += 1
            return

        x = self._to_float(value)
        self.n += 1
        if self.n == 1:
            self.mean = x
            self.min = x
            self.max = x
            return

        delta = x - self.mean
        self.mean += delta / self.n
        self._s += delta * (x - self.mean)
        if x < self.min:
            self.min = x
        if x > self.max:
            self.max = x

    def count(self) -> int:
        return self.n

    def variance(self) -> float:
        """Sample variance (Bessel's correction); 0 for fewer than two values."""
        if self.n <= 1:
            return 0.0
        return self._s / (self.n - 1)

    def stddev(self) -> float:
        return math.sqrt(self.variance())

    def summary(self) -> str:
        if self.all_null:
            return 'ALL NULL'
        if self.n == 0:
            return 'EMPTY'
        return (
            self._null_prefix()
            + f"min: {self.min:.3g}, max: {self.max:.3g}, mean: {self.mean:.3g}, std: {self.stddev():.3g}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'count': self.n,
            'null_count': self.null_count,
            'total_count': self.total_count,
            'min': self.min,
            'max': self.max,
            'mean': self.mean if self.n else None,
            'variance': self.variance() if self.n else None,
            'std_dev': self.stddev() if self.n else None,
        }
