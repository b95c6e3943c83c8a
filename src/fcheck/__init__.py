"""
fcheck - File Coverage Checker

Infers the schema of a tabular file (CSV, Avro, Parquet), streams its rows
through online statistic collectors and reports per-column coverage,
numeric summaries and the most or least frequent values.
"""

__version__ = '1.0.0'
__author__ = 'Your Team'

from .exceptions import (
    FileCheckError,
    ConfigurationError,
    UnsupportedFormatError,
    SampleError,
    ResourceError,
    DecodeError,
    ContractViolationError,
    ReaderStateError
)
from .profiling import (
    Column,
    ColumnType,
    ColumnClassifier,
    NumericStats,
    CategoricalFreq,
    FileProfiler,
    ProfileReport,
    profile
)
from .readers import BaseReader, DelimitedTextReader, AvroReader, ParquetReader, create_reader
from .reporting import ReportGenerator
from .utils import ConfigLoader, setup_logging

__all__ = [
    'FileCheckError',
    'ConfigurationError',
    'UnsupportedFormatError',
    'SampleError',
    'ResourceError',
    'DecodeError',
    'ContractViolationError',
    'ReaderStateError',
    'Column',
    'ColumnType',
    'ColumnClassifier',
    'NumericStats',
    'CategoricalFreq',
    'FileProfiler',
    'ProfileReport',
    'profile',
    'BaseReader',
    'DelimitedTextReader',
    'AvroReader',
    'ParquetReader',
    'create_reader',
    'ReportGenerator',
    'ConfigLoader',
    'setup_logging',
]
