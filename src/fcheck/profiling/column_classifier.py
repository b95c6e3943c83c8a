"""
Column Type Classifier Module

Infers column names, header presence and column data types from a small
sample of raw string rows, before a delimited file is streamed.
"""

import math
import re
from typing import List, Sequence, Tuple

from .column_types import NULL_LITERAL, ColumnType
from ..exceptions import SampleError
from ..utils.logger import get_logger

logger = get_logger('column_classifier')

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ColumnClassifier:
    """Classifies sampled cells and columns based on their text patterns."""

    # A float needs the decimal point; plain digit runs are integers
    FLOAT_PATTERN = re.compile(r'[-+]?[0-9]+\.[0-9]*([eE][-+]?[0-9]+)?')
    INT_PATTERN = re.compile(r'[-+]?[0-9]+')

    POSITIONAL_NAME = 'c_{}'

    @classmethod
    def classify_value(cls, value: str) -> ColumnType:
        """
        Classify a single raw cell.

        Args:
            value: Raw string token

        Returns:
            FLOAT, INTEGER or STRING for non-empty cells, UNKNOWN for empty
            cells and the null literal
        """
        if not value or value == NULL_LITERAL:
            return ColumnType.UNKNOWN

        if cls.FLOAT_PATTERN.fullmatch(value):
            if math.isfinite(float(value)):
                return ColumnType.FLOAT
        elif cls.INT_PATTERN.fullmatch(value):
            if INT64_MIN <= int(value) <= INT64_MAX:
                return ColumnType.INTEGER

        return ColumnType.STRING

    @classmethod
    def reduce_column(cls, cell_types: Sequence[ColumnType]) -> ColumnType:
        """
        Reduce the per-row types of one column to a single column type.

        Empty cells are skipped. Mixed integers and floats widen to FLOAT,
        any other mix settles on STRING. A column with no typed cell is STRING.

        Args:
            cell_types: Classified types of the data rows, in row order

        Returns:
            Column type
        """
        column_type = ColumnType.UNKNOWN
        for cell_type in cell_types:
            column_type = ColumnType.widen(column_type, cell_type)
            if column_type == ColumnType.STRING:
                break

        if column_type == ColumnType.UNKNOWN:
            return ColumnType.STRING
        return column_type

    @classmethod
    def sniff(
        cls,
        sample: Sequence[Sequence[str]]
    ) -> Tuple[bool, List[str], List[ColumnType]]:
        """
        Infer header presence, field names and column types from a sample.

        Row 0 is the header candidate; rows 1..N-1 decide the column types.
        The header is rejected when any of its cells is empty, or when a
        header cell has the same numeric type as the data below it.

        Args:
            sample: At least two rows of raw string cells, all the same width

        Returns:
            Tuple of (has_header, fields, types)

        Raises:
            SampleError: If the sample has fewer than two rows or ragged rows
        """
        if len(sample) < 2:
            raise SampleError(
                f"At least 2 sample rows are required for type inference, got {len(sample)}"
            )

        n_fields = len(sample[0])
        for row_idx, row in enumerate(sample):
            if len(row) != n_fields:
                raise SampleError(
                    f"Sample row {row_idx} has {len(row)} fields, expected {n_fields}"
                )

        header = sample[0]
        has_header = all(len(cell) > 0 for cell in header)

        cell_types = [[cls.classify_value(cell) for cell in row] for row in sample]

        types = []
        for col_idx in range(n_fields):
            header_type = cell_types[0][col_idx]
            column_type = cls.reduce_column([row[col_idx] for row in cell_types[1:]])

            if column_type != ColumnType.STRING and column_type == header_type:
                # A header cell that looks like the data means row 0 is data
                has_header = False

            types.append(column_type)

        if has_header:
            fields = list(header)
        else:
            fields = [cls.POSITIONAL_NAME.format(i) for i in range(n_fields)]

        logger.debug(f"Sniffed {n_fields} columns, header={has_header}, types={[str(t) for t in types]}")
        return has_header, fields, types
