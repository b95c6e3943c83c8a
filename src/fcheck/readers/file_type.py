"""File format detection and reader selection."""

from enum import Enum
from typing import Optional

from .avro_reader import AvroReader
from .base_reader import BaseReader
from .csv_reader import DEFAULT_SAMPLE_ROWS, DelimitedTextReader
from .parquet_reader import DEFAULT_BATCH_SIZE, ParquetReader
from ..exceptions import ResourceError, UnsupportedFormatError
from ..utils.logger import get_logger

logger = get_logger('file_type')

MAGIC_PARQUET = b'PAR1'
MAGIC_AVRO = b'Obj\x01'
MAGIC_LENGTH = 4


class FileType(Enum):
    """Supported and recognised file formats."""
    UNKNOWN = 'unknown'
    AVRO = 'avro'
    CSV = 'csv'
    JSON = 'json'
    PARQUET = 'parquet'


def infer_file_type(header: bytes, file_name: str, delimiter: Optional[str] = None) -> FileType:
    """
    Decide the file format from its leading bytes and name.

    Args:
        header: First bytes of the file
        file_name: File name, only its suffix is used
        delimiter: Explicit delimiter; when given, non-binary files are CSV

    Returns:
        Detected FileType
    """
    magic = header[:MAGIC_LENGTH]
    if magic == MAGIC_PARQUET:
        return FileType.PARQUET
    if magic == MAGIC_AVRO:
        return FileType.AVRO

    name = file_name.lower()
    if delimiter or name.endswith('.csv') or name.endswith('.tsv'):
        return FileType.CSV
    if name.endswith('.json'):
        return FileType.JSON
    return FileType.UNKNOWN


def sniff_file_type(file_name: str, delimiter: Optional[str] = None) -> FileType:
    """
    Read the magic bytes of a file and infer its type.

    Raises:
        ResourceError: If the file cannot be read or is shorter than the magic
    """
    try:
        with open(file_name, 'rb') as f:
            header = f.read(MAGIC_LENGTH)
    except OSError as e:
        raise ResourceError(f"Error reading {file_name}: {e}", stage='inference') from e

    if len(header) != MAGIC_LENGTH:
        raise ResourceError(
            f"Error reading {file_name}: file is shorter than {MAGIC_LENGTH} bytes",
            stage='inference'
        )
    return infer_file_type(header, file_name, delimiter)


def create_reader(
    file_name: str,
    delimiter: Optional[str] = None,
    encoding: str = 'utf-8',
    sample_rows: int = DEFAULT_SAMPLE_ROWS,
    batch_size: int = DEFAULT_BATCH_SIZE
) -> BaseReader:
    """
    Create the reader matching a file's format.

    Args:
        file_name: Path to the file
        delimiter: CSV delimiter override; forces CSV for non-binary files
        encoding: Text encoding for delimited files
        sample_rows: Records sampled for delimited type inference
        batch_size: Parquet record batch size

    Returns:
        An uninitialized reader

    Raises:
        UnsupportedFormatError: If no reader exists for the detected format
    """
    file_type = sniff_file_type(file_name, delimiter)
    logger.info(f"Detected file type {file_type.value} for {file_name}")

    if file_type == FileType.CSV:
        if not delimiter:
            delimiter = '\t' if file_name.lower().endswith('.tsv') else ','
        return DelimitedTextReader(file_name, delimiter[0], encoding=encoding, sample_rows=sample_rows)
    if file_type == FileType.AVRO:
        return AvroReader(file_name)
    if file_type == FileType.PARQUET:
        return ParquetReader(file_name, batch_size=batch_size)

    raise UnsupportedFormatError(f"Unknown file format: {file_name} ({file_type.value})")
