"""Shared pytest fixtures for all tests."""

from typing import Iterator, List, Sequence

import pytest

from fcheck.profiling.column_types import Column, ColumnType, Row
from fcheck.readers.base_reader import BaseReader


class ListReader(BaseReader):
    """In-memory reader serving a fixed list of typed rows."""

    def __init__(self, columns: Sequence[Column], rows: Sequence[Row], file_name: str = 'memory.dat'):
        super().__init__(file_name)
        self._fixed_columns = list(columns)
        self._fixed_rows = list(rows)
        self.closed = False

    def _initialize(self) -> List[Column]:
        return self._fixed_columns

    def _describe(self) -> str:
        return f"Memory, {len(self._columns)} columns"

    def _iter_rows(self) -> Iterator[Row]:
        try:
            for row in self._fixed_rows:
                yield tuple(row)
        finally:
            self.closed = True


@pytest.fixture
def list_reader():
    """Factory for in-memory readers."""
    return ListReader


@pytest.fixture
def mixed_columns() -> List[Column]:
    return [
        Column('name', ColumnType.STRING),
        Column('age', ColumnType.INTEGER),
        Column('score', ColumnType.FLOAT),
        Column('city', ColumnType.STRING),
    ]


@pytest.fixture
def mixed_rows() -> List[Row]:
    return [
        ('alice', 31, 7.5, 'Paris'),
        ('bob', 45, None, 'Berlin'),
        ('carol', None, 9.0, 'Paris'),
        ('dave', 28, 6.25, ''),
        ('erin', 39, 8.0, None),
        ('frank', 52, 5.5, 'Paris'),
    ]


@pytest.fixture
def write_text(tmp_path):
    """Write a text file under tmp_path and return its path as a string."""
    def _write(name: str, content: str, encoding: str = 'utf-8') -> str:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return str(path)
    return _write


@pytest.fixture
def people_csv(write_text) -> str:
    content = (
        "id,name,height,city\n"
        "1,Anna,1.72,Oslo\n"
        "2,Ben,1.80,Rome\n"
        "3,Cleo,,Oslo\n"
        "4,Dan,1.65,\n"
        "5,Eve,1.70,Oslo\n"
    )
    return write_text('people.csv', content)
