"""Schema inference, statistic collectors and the file profiler."""

from .column_types import Column, ColumnType
from .column_classifier import ColumnClassifier
from .metrics import CategoricalFreq, NumericStats, StatCollector
from .stats_calculator import (
    ColumnCoverage,
    ColumnFrequency,
    FrequencyValue,
    ProfileReport,
    StatsCalculator
)
from .profiler import FileProfiler, profile

__all__ = [
    'Column',
    'ColumnType',
    'ColumnClassifier',
    'CategoricalFreq',
    'NumericStats',
    'StatCollector',
    'ColumnCoverage',
    'ColumnFrequency',
    'FrequencyValue',
    'ProfileReport',
    'StatsCalculator',
    'FileProfiler',
    'profile'
]
