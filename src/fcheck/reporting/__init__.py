"""Reporting modules."""

from .report_generator import ReportGenerator
from .csv_generator import CSVGenerator

__all__ = ['ReportGenerator', 'CSVGenerator']
