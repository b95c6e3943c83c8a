"""Parquet reader backed by pyarrow."""

from typing import Iterator, List

import pyarrow as pa
import pyarrow.parquet as pq

from .base_reader import BaseReader
from ..exceptions import ConfigurationError, DecodeError, ResourceError
from ..profiling.column_types import Column, ColumnType, Row
from ..utils.logger import get_logger

logger = get_logger('parquet_reader')

DEFAULT_BATCH_SIZE = 10000


class ParquetReader(BaseReader):
    """Read a Parquet file one record batch at a time."""

    def __init__(self, file_name: str, batch_size: int = DEFAULT_BATCH_SIZE):
        super().__init__(file_name)
        self.batch_size = batch_size
        self.compression = 'UNCOMPRESSED'
        self.num_rows = 0

    @staticmethod
    def map_arrow_type(arrow_type: pa.DataType) -> ColumnType:
        """Map an Arrow type to a column type."""
        if pa.types.is_boolean(arrow_type):
            return ColumnType.STRING
        if pa.types.is_integer(arrow_type):
            return ColumnType.INTEGER
        if pa.types.is_floating(arrow_type) or pa.types.is_decimal(arrow_type):
            return ColumnType.FLOAT
        return ColumnType.STRING

    def _open(self) -> pq.ParquetFile:
        try:
            return pq.ParquetFile(self._file_name)
        except OSError as e:
            raise ResourceError(f"Cannot open {self._file_name}: {e}") from e
        except pa.ArrowInvalid as e:
            raise ConfigurationError(f"Cannot read Parquet metadata of {self._file_name}: {e}") from e

    def _initialize(self) -> List[Column]:
        with self._open() as parquet_file:
            schema = parquet_file.schema_arrow
            metadata = parquet_file.metadata
            self.num_rows = metadata.num_rows
            if metadata.num_row_groups > 0 and metadata.num_columns > 0:
                self.compression = metadata.row_group(0).column(0).compression

        return [Column(field.name, self.map_arrow_type(field.type)) for field in schema]

    def _describe(self) -> str:
        return (
            f"Parquet, {len(self._columns)} columns, {self.compression} compression, "
            f"{self.num_rows:,} rows"
        )

    def _iter_rows(self) -> Iterator[Row]:
        with self._open() as parquet_file:
            try:
                for batch in parquet_file.iter_batches(batch_size=self.batch_size):
                    yield from zip(*(column.to_pylist() for column in batch.columns))
            except (pa.ArrowInvalid, OSError) as e:
                raise DecodeError(f"Cannot decode Parquet data in {self._file_name}: {e}") from e
