"""Delimited text reader with sample based schema inference."""

import csv
from typing import Iterator, List, Optional

from .base_reader import BaseReader
from ..exceptions import DecodeError, ResourceError
from ..profiling.column_classifier import ColumnClassifier
from ..profiling.column_types import Column, ColumnType, Row
from ..utils.logger import get_logger

logger = get_logger('csv_reader')

DEFAULT_SAMPLE_ROWS = 10


class DelimitedTextReader(BaseReader):
    """
    Read CSV-like files.

    The first ``sample_rows`` records are sniffed by :class:`ColumnClassifier`
    to decide the header and column types; every row is then converted to
    those types while streaming.
    """

    def __init__(
        self,
        file_name: str,
        delimiter: str = ',',
        encoding: str = 'utf-8',
        sample_rows: int = DEFAULT_SAMPLE_ROWS
    ):
        """
        Initialize delimited text reader.

        Args:
            file_name: Path to the file
            delimiter: Single character field delimiter
            encoding: Text encoding of the file
            sample_rows: Number of leading records used for type inference
        """
        super().__init__(file_name)
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter
        self.encoding = encoding
        self.sample_rows = sample_rows
        self.has_header = True
        self._types: List[ColumnType] = []

    def _open(self):
        try:
            return open(self._file_name, 'r', encoding=self.encoding, newline='')
        except OSError as e:
            raise ResourceError(f"Cannot open {self._file_name}: {e}") from e

    def _records(self, f) -> Iterator[List[str]]:
        """Yield non-blank records, turning tokenizer failures into DecodeError."""
        reader = csv.reader(f, delimiter=self.delimiter)
        while True:
            try:
                record = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                raise DecodeError(f"{self._file_name}, line {reader.line_num}: {e}") from e
            except UnicodeDecodeError as e:
                raise DecodeError(f"{self._file_name}, line {reader.line_num + 1}: {e}") from e
            except OSError as e:
                raise ResourceError(f"Error reading {self._file_name}: {e}") from e
            if record:
                yield record

    def _initialize(self) -> List[Column]:
        sample = []
        with self._open() as f:
            for record in self._records(f):
                sample.append(record)
                if len(sample) >= self.sample_rows:
                    break

        logger.debug(f"Read {len(sample)} sample rows from {self._file_name}")
        self.has_header, fields, self._types = ColumnClassifier.sniff(sample)
        return [Column(name, col_type) for name, col_type in zip(fields, self._types)]

    def _describe(self) -> str:
        return f"CSV, {len(self._columns)} columns, delimited with '{self.delimiter}'"

    @staticmethod
    def _convert(value: str, col_type: ColumnType):
        if col_type == ColumnType.STRING:
            return value

        cell_type = ColumnClassifier.classify_value(value)
        if cell_type == ColumnType.UNKNOWN:
            return None
        if cell_type == col_type:
            return int(value) if col_type == ColumnType.INTEGER else float(value)
        if cell_type == ColumnType.INTEGER and col_type == ColumnType.FLOAT:
            return float(value)
        # Left as text; the numeric collector rejects it
        return value

    def convert_record(self, record: List[str], record_num: Optional[int] = None) -> Row:
        """
        Convert one raw record to a typed row.

        Args:
            record: Raw string cells
            record_num: 1-based record number in the file, for error messages

        Returns:
            Tuple of typed values

        Raises:
            DecodeError: If the record width differs from the column count
        """
        if len(record) != len(self._types):
            raise DecodeError(
                f"{self._file_name}, record {record_num}: expected {len(self._types)} fields, got {len(record)}"
            )
        return tuple(self._convert(value, col_type) for value, col_type in zip(record, self._types))

    def _iter_rows(self) -> Iterator[Row]:
        with self._open() as f:
            records = self._records(f)
            if self.has_header:
                next(records, None)
            for record_num, record in enumerate(records, 2 if self.has_header else 1):
                yield self.convert_record(record, record_num)
