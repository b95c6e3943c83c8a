"""Main file profiling engine."""

import time
from typing import Iterator, List

from .column_types import Column, Row
from .metrics.base import StatCollector
from .stats_calculator import ProfileReport, StatsCalculator
from ..exceptions import ContractViolationError
from ..readers.pipeline import prefetch_rows
from ..utils.logger import get_logger

logger = get_logger('profiler')


class FileProfiler:
    """Stream a file through per-column collectors and summarise the result."""

    def __init__(
        self,
        sort_fields: bool = True,
        sample_size: int = 5,
        least_frequent: bool = False,
        threaded: bool = False
    ):
        """
        Initialize file profiler.

        Args:
            sort_fields: Order report columns alphabetically instead of file order
            sample_size: Number of frequent values listed per categorical column
            least_frequent: List the least instead of the most frequent values
            threaded: Decode rows on a worker thread, one row ahead of the profiler
        """
        if sample_size < 0:
            raise ValueError(f"sample_size must not be negative, got {sample_size}")
        self.sort_fields = sort_fields
        self.sample_size = sample_size
        self.least_frequent = least_frequent
        self.threaded = threaded

    def profile(self, reader) -> ProfileReport:
        """
        Profile every row of a file.

        Args:
            reader: Uninitialized BaseReader for the file

        Returns:
            ProfileReport; without coverage or frequency sections when the file has no rows

        Raises:
            FileCheckError: On any inference, streaming or aggregation failure
        """
        logger.info(f"Starting profile of {reader.file_name()}")
        reader.initialize()
        columns = reader.columns()
        collectors = StatsCalculator.create_collectors(columns)
        for column, collector in zip(columns, collectors):
            logger.debug(f"Column {column.name} ({column.type}) -> {collector.__class__.__name__}")

        start = time.perf_counter()
        rows = reader.rows()
        if self.threaded:
            rows = prefetch_rows(rows)
        try:
            row_count = self._consume(rows, columns, collectors)
        finally:
            close = getattr(rows, 'close', None)
            if close is not None:
                close()
        elapsed = time.perf_counter() - start
        logger.info(f"Read {row_count:,} rows from {reader.file_name()} in {elapsed:.3f}s")

        report = ProfileReport(
            file_name=reader.file_name(),
            file_info=reader.describe(),
            row_count=row_count,
            elapsed_seconds=elapsed,
            sample_size=self.sample_size,
            least_frequent=self.least_frequent,
            sorted_fields=self.sort_fields
        )
        if report.no_data:
            logger.warning(f"No data found in {reader.file_name()}")
            return report

        order = StatsCalculator.order_columns(columns, self.sort_fields)
        report.columns = StatsCalculator.build_coverage(columns, collectors, order, row_count)

        if any(not column.is_numeric for column in columns):
            report.frequencies = StatsCalculator.build_frequencies(
                columns, collectors, order, row_count, self.sample_size, self.least_frequent
            )

        logger.info(f"Profile completed for {reader.file_name()}")
        return report

    @staticmethod
    def _consume(
        rows: Iterator[Row],
        columns: List[Column],
        collectors: List[StatCollector]
    ) -> int:
        """Push every value into its column's collector; returns the row count."""
        row_count = 0
        for row in rows:
            row_count += 1
            for i, value in enumerate(row):
                try:
                    collectors[i].push(value)
                except ContractViolationError as e:
                    raise ContractViolationError(
                        f"Column '{columns[i].name}' ({columns[i].type}), row {row_count}: {e.message}"
                    ) from e
        return row_count


def profile(
    stream,
    sort_columns_alphabetically: bool = True,
    sample_size: int = 5,
    want_least_frequent: bool = False,
    threaded: bool = False
) -> ProfileReport:
    """Profile a reader with a one-off FileProfiler."""
    profiler = FileProfiler(
        sort_fields=sort_columns_alphabetically,
        sample_size=sample_size,
        least_frequent=want_least_frequent,
        threaded=threaded
    )
    return profiler.profile(stream)
