"""Tests for configuration loading."""

import os

import pytest

from fcheck.exceptions import ConfigurationError
from fcheck.utils.config_loader import ConfigLoader


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for env_name, _, _, _ in ConfigLoader.ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_defaults(self):
        loader = ConfigLoader()

        assert loader.get('profiling.sample_values') == 5
        assert loader.get_profiler_options() == {
            'sort_fields': True,
            'sample_size': 5,
            'least_frequent': False,
            'threaded': False,
        }
        assert loader.get_reader_options()['delimiter'] is None
        assert loader.get_reader_options()['encoding'] == 'utf-8'

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / 'custom.yaml'
        path.write_text("profiling:\n  sample_values: 3\nreading:\n  csv_delimiter: ';'\n")
        loader = ConfigLoader(config_path=str(path))

        assert loader.get('profiling.sample_values') == 3
        # Keys missing from the file keep their defaults
        assert loader.get('profiling.sort_fields') is True
        assert loader.get_reader_options()['delimiter'] == ';'

    def test_config_yaml_in_working_directory(self, tmp_path):
        (tmp_path / 'config').mkdir()
        (tmp_path / 'config' / 'config.yaml').write_text("pipeline:\n  threaded: true\n")

        assert ConfigLoader().get_profiler_options()['threaded'] is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv('FCHECK_SAMPLE_VALUES', '9')
        monkeypatch.setenv('FCHECK_SORT_FIELDS', 'false')
        monkeypatch.setenv('FCHECK_DELIMITER', '|')
        loader = ConfigLoader()

        assert loader.get_profiler_options()['sample_size'] == 9
        assert loader.get_profiler_options()['sort_fields'] is False
        assert loader.get_reader_options()['delimiter'] == '|'

    def test_env_file(self, tmp_path):
        env_file = tmp_path / 'test.env'
        env_file.write_text("FCHECK_LEAST_FREQUENT=yes\n")
        try:
            loader = ConfigLoader(env_path=str(env_file))
        finally:
            # load_dotenv writes into os.environ
            os.environ.pop('FCHECK_LEAST_FREQUENT', None)

        assert loader.get('profiling.least_frequent') is True

    def test_env_file_in_working_directory(self, tmp_path):
        (tmp_path / '.env').write_text("FCHECK_SAMPLE_VALUES=7\n")
        try:
            loader = ConfigLoader()
        finally:
            os.environ.pop('FCHECK_SAMPLE_VALUES', None)

        assert loader.get_profiler_options()['sample_size'] == 7

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv('FCHECK_SAMPLE_ROWS', 'ten')
        with pytest.raises(ConfigurationError, match='FCHECK_SAMPLE_ROWS'):
            ConfigLoader()

    def test_missing_explicit_config(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_path=str(tmp_path / 'missing.yaml'))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text("profiling: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader(config_path=str(path))

    def test_get_with_default(self):
        loader = ConfigLoader()
        assert loader.get('reporting.output_dir', 'out') == 'out'
        assert loader.get('no.such.key') is None
