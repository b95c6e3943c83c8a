"""Tests for format detection and reader selection."""

import pytest

from fcheck.exceptions import ResourceError, UnsupportedFormatError
from fcheck.readers.avro_reader import AvroReader
from fcheck.readers.csv_reader import DelimitedTextReader
from fcheck.readers.file_type import FileType, create_reader, infer_file_type, sniff_file_type
from fcheck.readers.parquet_reader import ParquetReader


class TestInferFileType:
    """Tests for the pure detection function."""

    def test_parquet_magic(self):
        assert infer_file_type(b'PAR1\x15\x04', 'data.bin') == FileType.PARQUET

    def test_avro_magic(self):
        assert infer_file_type(b'Obj\x01\x04\x14', 'data.csv') == FileType.AVRO

    def test_csv_by_suffix(self):
        assert infer_file_type(b'a,b,', 'DATA.CSV') == FileType.CSV
        assert infer_file_type(b'a\tb\t', 'data.tsv') == FileType.CSV

    def test_delimiter_forces_csv(self):
        assert infer_file_type(b'a|b|', 'export.txt', '|') == FileType.CSV

    def test_json_by_suffix(self):
        assert infer_file_type(b'{"a"', 'rows.json') == FileType.JSON

    def test_unknown(self):
        assert infer_file_type(b'abcd', 'notes.txt') == FileType.UNKNOWN


class TestCreateReader:
    """Tests for reader selection from files on disk."""

    def test_csv_reader(self, people_csv):
        reader = create_reader(people_csv)
        assert isinstance(reader, DelimitedTextReader)
        assert reader.delimiter == ','

    def test_tsv_defaults_to_tab(self, write_text):
        reader = create_reader(write_text('data.tsv', "a\tb\n1\t2\n"))
        assert reader.delimiter == '\t'

    def test_explicit_delimiter(self, write_text):
        reader = create_reader(write_text('data.dat', "a;b\n1;2\n"), delimiter=';')
        assert isinstance(reader, DelimitedTextReader)
        assert reader.delimiter == ';'

    def test_avro_by_magic(self, tmp_path):
        path = tmp_path / 'events.bin'
        path.write_bytes(b'Obj\x01' + b'\x00' * 16)
        assert isinstance(create_reader(str(path)), AvroReader)

    def test_parquet_by_magic(self, tmp_path):
        path = tmp_path / 'table'
        path.write_bytes(b'PAR1' + b'\x00' * 16)
        reader = create_reader(str(path), batch_size=128)
        assert isinstance(reader, ParquetReader)
        assert reader.batch_size == 128

    def test_json_not_supported(self, write_text):
        with pytest.raises(UnsupportedFormatError):
            create_reader(write_text('rows.json', '[{"a": 1}]'))

    def test_unknown_format(self, write_text):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            create_reader(write_text('notes.txt', 'just some text'))
        assert exc_info.value.stage == 'inference'

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceError):
            sniff_file_type(str(tmp_path / 'nope.csv'))

    def test_file_shorter_than_magic(self, write_text):
        with pytest.raises(ResourceError):
            sniff_file_type(write_text('tiny.csv', 'a'))
