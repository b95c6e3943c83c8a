"""Statistic collectors for different column types."""

from .base import StatCollector
from .numerical_metrics import NumericStats
from .categorical_metrics import CategoricalFreq

__all__ = [
    'StatCollector',
    'NumericStats',
    'CategoricalFreq'
]
