"""
Report Building Module

Allocates one statistic collector per column and turns the filled collectors
into the coverage and frequency sections of a profile report.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .column_types import Column
from .metrics.base import StatCollector
from .metrics.categorical_metrics import CategoricalFreq
from .metrics.numerical_metrics import NumericStats


@dataclass
class ColumnCoverage:
    """Coverage line of one column."""
    name: str
    type: str
    count: int
    percentage: float
    summary: str
    stats: Dict[str, Any] = field(default_factory=dict)


@dataclass
class FrequencyValue:
    """One value of a frequency table."""
    value: str
    count: int
    percentage: float


@dataclass
class ColumnFrequency:
    """Most or least frequent values of one categorical column."""
    name: str
    available: bool
    values: List[FrequencyValue] = field(default_factory=list)


@dataclass
class ProfileReport:
    """Everything a renderer needs to print a coverage report."""
    file_name: str
    file_info: str
    row_count: int
    elapsed_seconds: float
    sample_size: int
    least_frequent: bool
    sorted_fields: bool
    columns: List[ColumnCoverage] = field(default_factory=list)
    frequencies: Optional[List[ColumnFrequency]] = None

    @property
    def no_data(self) -> bool:
        return self.row_count == 0

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result['no_data'] = self.no_data
        return result


class StatsCalculator:
    """Creates collectors and builds report sections from them."""

    @staticmethod
    def create_collectors(columns: Sequence[Column]) -> List[StatCollector]:
        """
        Allocate a fresh collector per column.

        Args:
            columns: Columns in file order

        Returns:
            NumericStats for integer and float columns, CategoricalFreq otherwise
        """
        return [NumericStats() if column.is_numeric else CategoricalFreq() for column in columns]

    @staticmethod
    def percentage(count: int, total: int) -> float:
        return 100.0 * count / total if total > 0 else 0.0

    @staticmethod
    def order_columns(columns: Sequence[Column], sort_alphabetically: bool) -> List[int]:
        """Column indices in report order."""
        indices = list(range(len(columns)))
        if sort_alphabetically:
            indices.sort(key=lambda i: columns[i].name)
        return indices

    @classmethod
    def build_coverage(
        cls,
        columns: Sequence[Column],
        collectors: Sequence[StatCollector],
        order: Sequence[int],
        row_count: int
    ) -> List[ColumnCoverage]:
        """
        Build the coverage section.

        Args:
            columns: Columns in file order
            collectors: Filled collectors, parallel to columns
            order: Column indices in report order
            row_count: Total rows read

        Returns:
            One ColumnCoverage per column, in report order
        """
        coverage = []
        for i in order:
            collector = collectors[i]
            count = collector.count()
            coverage.append(ColumnCoverage(
                name=columns[i].name,
                type=str(columns[i].type),
                count=count,
                percentage=cls.percentage(count, row_count),
                summary=collector.summary(),
                stats=collector.to_dict()
            ))
        return coverage

    @classmethod
    def build_frequencies(
        cls,
        columns: Sequence[Column],
        collectors: Sequence[StatCollector],
        order: Sequence[int],
        row_count: int,
        sample_size: int,
        least_frequent: bool
    ) -> List[ColumnFrequency]:
        """
        Build the frequency section for categorical columns.

        Columns without any non-empty value are marked as not available.
        """
        frequencies = []
        for i in order:
            if columns[i].is_numeric:
                continue

            collector = collectors[i]
            if collector.count() == 0:
                frequencies.append(ColumnFrequency(name=columns[i].name, available=False))
                continue

            values, counts = collector.frequencies(sample_size, least_frequent)
            frequencies.append(ColumnFrequency(
                name=columns[i].name,
                available=True,
                values=[
                    FrequencyValue(value=value, count=count, percentage=cls.percentage(count, row_count))
                    for value, count in zip(values, counts)
                ]
            ))
        return frequencies
