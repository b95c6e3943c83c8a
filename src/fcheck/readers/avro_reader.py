"""Avro object container reader."""

from typing import Any, Iterator, List

import fastavro

from .base_reader import BaseReader
from ..exceptions import ConfigurationError, DecodeError, ResourceError
from ..profiling.column_types import Column, ColumnType, Row
from ..utils.logger import get_logger

logger = get_logger('avro_reader')

INTEGER_TYPES = {'int', 'long'}
FLOAT_TYPES = {'float', 'double'}

# Errors fastavro raises on corrupt blocks or truncated files
DECODE_ERRORS = (EOFError, ValueError, KeyError, IndexError, TypeError, RuntimeError)


class AvroReader(BaseReader):
    """Read records from an Avro object container file."""

    def __init__(self, file_name: str):
        super().__init__(file_name)
        self.compression = 'null'
        self.schema = None
        self._field_names: List[str] = []

    def _open(self):
        try:
            return open(self._file_name, 'rb')
        except OSError as e:
            raise ResourceError(f"Cannot open {self._file_name}: {e}") from e

    @classmethod
    def map_field_type(cls, avro_type: Any) -> ColumnType:
        """
        Map an Avro field schema to a column type.

        Unions are reduced over their non-null branches; logical types and
        complex types are reported as strings.

        Args:
            avro_type: Field type as found in the parsed schema

        Returns:
            Column type
        """
        if isinstance(avro_type, list):
            column_type = ColumnType.UNKNOWN
            for branch in avro_type:
                if branch == 'null':
                    continue
                column_type = ColumnType.widen(column_type, cls.map_field_type(branch))
            return ColumnType.STRING if column_type == ColumnType.UNKNOWN else column_type

        if isinstance(avro_type, dict):
            if 'logicalType' in avro_type:
                return ColumnType.STRING
            return cls.map_field_type(avro_type.get('type'))

        if avro_type in INTEGER_TYPES:
            return ColumnType.INTEGER
        if avro_type in FLOAT_TYPES:
            return ColumnType.FLOAT
        return ColumnType.STRING

    def _initialize(self) -> List[Column]:
        with self._open() as f:
            try:
                avro_reader = fastavro.reader(f)
            except DECODE_ERRORS as e:
                raise ConfigurationError(f"Cannot read Avro header of {self._file_name}: {e}") from e

            schema = avro_reader.writer_schema
            self.compression = avro_reader.metadata.get('avro.codec', 'null')

        if not isinstance(schema, dict) or schema.get('type') != 'record':
            raise ConfigurationError(
                f"{self._file_name}: schema types other than record are not supported"
            )

        self.schema = schema
        columns = []
        for field in schema['fields']:
            columns.append(Column(field['name'], self.map_field_type(field['type'])))
        self._field_names = [column.name for column in columns]

        logger.debug(f"Avro schema of {self._file_name}: {[(c.name, str(c.type)) for c in columns]}")
        return columns

    def _describe(self) -> str:
        return f"Avro, {len(self._columns)} fields, {self.compression} compression"

    def _iter_rows(self) -> Iterator[Row]:
        with self._open() as f:
            try:
                records = fastavro.reader(f)
                for record in records:
                    yield tuple(record.get(name) for name in self._field_names)
            except DECODE_ERRORS as e:
                raise DecodeError(f"Cannot decode Avro record in {self._file_name}: {e}") from e
