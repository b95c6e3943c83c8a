"""Format specific readers producing typed row streams."""

from .base_reader import BaseReader
from .csv_reader import DelimitedTextReader
from .avro_reader import AvroReader
from .parquet_reader import ParquetReader
from .file_type import FileType, create_reader, infer_file_type, sniff_file_type
from .pipeline import prefetch_rows

__all__ = [
    'BaseReader',
    'DelimitedTextReader',
    'AvroReader',
    'ParquetReader',
    'FileType',
    'create_reader',
    'infer_file_type',
    'sniff_file_type',
    'prefetch_rows'
]
