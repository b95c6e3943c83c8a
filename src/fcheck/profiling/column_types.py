"""Column type vocabulary shared by readers, collectors and the profiler."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class ColumnType(Enum):
    """Column data types, ordered for widening: INTEGER < FLOAT < STRING."""
    UNKNOWN = 'unknown'
    STRING = 'string'
    INTEGER = 'int'
    FLOAT = 'float'

    def __str__(self) -> str:
        return self.value

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnType.INTEGER, ColumnType.FLOAT)

    @staticmethod
    def widen(current: 'ColumnType', other: 'ColumnType') -> 'ColumnType':
        """
        Return the least specific type able to hold both inputs.

        UNKNOWN is the identity element; mixing numeric types gives FLOAT and
        anything else falls back to STRING.
        """
        if current == ColumnType.UNKNOWN:
            return other
        if other == ColumnType.UNKNOWN or other == current:
            return current
        if current.is_numeric and other.is_numeric:
            return ColumnType.FLOAT
        return ColumnType.STRING


@dataclass(frozen=True)
class Column:
    """A named, typed column; its position in the column list matters."""
    name: str
    type: ColumnType

    @property
    def is_numeric(self) -> bool:
        return self.type.is_numeric


# One value per column, same order as the reader's columns()
Row = Tuple[Any, ...]

# Text cell that stands for a missing value, like an empty cell
NULL_LITERAL = 'null'
