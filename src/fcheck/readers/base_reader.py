"""Base reader interface for tabular files."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, List, Optional

from ..exceptions import FileCheckError, ReaderStateError
from ..profiling.column_types import Column, Row
from ..utils.logger import get_logger

logger = get_logger('base_reader')


class BaseReader(ABC):
    """
    Abstract base class for single-pass file readers.

    Lifecycle: construct, call :meth:`initialize` exactly once, then read
    :meth:`columns` and consume :meth:`rows` once. Subclasses implement the
    ``_initialize``, ``_describe`` and ``_iter_rows`` hooks; the state checks
    are shared here.
    """

    def __init__(self, file_name: str):
        """
        Initialize base reader.

        Args:
            file_name: Path of the file to read
        """
        self._file_name = str(file_name)
        self._columns: Optional[List[Column]] = None
        self._rows_started = False

    def file_name(self) -> str:
        """Identifier of the file, for reporting."""
        return self._file_name

    @property
    def path(self) -> Path:
        return Path(self._file_name)

    def initialize(self) -> None:
        """
        Read the schema (or a sample) and fix the column list.

        Every error raised while initializing reports the inference stage.

        Raises:
            ReaderStateError: If called more than once
            ResourceError: If the file cannot be read
            ConfigurationError: If the schema cannot be determined
            DecodeError: If the sample or schema cannot be decoded
        """
        if self._columns is not None:
            raise ReaderStateError(f"Reader for {self._file_name} is already initialized")

        try:
            columns = self._initialize()
        except FileCheckError as e:
            e.stage = 'inference'
            raise
        self._columns = list(columns)
        logger.info(f"Initialized {self.__class__.__name__} for {self._file_name}: {len(self._columns)} columns")

    def columns(self) -> List[Column]:
        """Columns in file order; stable after :meth:`initialize`."""
        self._check_initialized('columns')
        return list(self._columns)

    def describe(self) -> str:
        """One-line description: format, compression, column count."""
        self._check_initialized('describe')
        return self._describe()

    def rows(self) -> Iterator[Row]:
        """
        Lazily yield every row once, typed and ordered like :meth:`columns`.

        Raises:
            ReaderStateError: If not initialized or if rows were already requested
        """
        self._check_initialized('rows')
        if self._rows_started:
            raise ReaderStateError(
                f"Rows of {self._file_name} were already read; create a new reader to read again"
            )
        self._rows_started = True
        return self._iter_rows()

    def _check_initialized(self, method: str) -> None:
        if self._columns is None:
            raise ReaderStateError(f"{method}() called before initialize() on {self._file_name}")

    @abstractmethod
    def _initialize(self) -> List[Column]:
        """Determine the columns of the file."""
        pass

    @abstractmethod
    def _describe(self) -> str:
        """Format specific one-line description."""
        pass

    @abstractmethod
    def _iter_rows(self) -> Iterator[Row]:
        """
        Generator over the file's rows.

        Implementations open the file inside the generator with a ``with``
        block so the handle is released when the generator is exhausted,
        closed or garbage collected.
        """
        pass
