"""Configuration loader for YAML and environment variables."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import find_dotenv, load_dotenv

from ..exceptions import ConfigurationError

DEFAULT_CONFIG: Dict[str, Any] = {
    'profiling': {
        'sort_fields': True,
        'sample_values': 5,
        'least_frequent': False,
    },
    'reading': {
        'csv_delimiter': None,
        'encoding': 'utf-8',
        'sample_rows': 10,
        'parquet_batch_size': 10000,
    },
    'pipeline': {
        'threaded': False,
    },
    'reporting': {
        'formats': ['text'],
        'output_dir': None,
    },
}

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigLoader:
    """Loads and manages configuration from YAML and environment variables."""

    # (environment variable, config section, key, converter)
    ENV_OVERRIDES = [
        ('FCHECK_SORT_FIELDS', 'profiling', 'sort_fields', _as_bool),
        ('FCHECK_SAMPLE_VALUES', 'profiling', 'sample_values', int),
        ('FCHECK_LEAST_FREQUENT', 'profiling', 'least_frequent', _as_bool),
        ('FCHECK_DELIMITER', 'reading', 'csv_delimiter', str),
        ('FCHECK_ENCODING', 'reading', 'encoding', str),
        ('FCHECK_SAMPLE_ROWS', 'reading', 'sample_rows', int),
        ('FCHECK_THREADED', 'pipeline', 'threaded', _as_bool),
    ]

    def __init__(self, config_path: Optional[str] = None, env_path: Optional[str] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML config file (default: config/config.yaml if present)
            env_path: Path to .env file (default: nearest .env in the working directory or its parents)
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv(find_dotenv(usecwd=True))

        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path is None:
            config_path = self._find_config_file()
        elif not Path(config_path).exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        if config_path:
            _merge(self.config, self._load_yaml(config_path))
        self._merge_env_overrides()

    def _find_config_file(self) -> Optional[str]:
        """Find config.yaml in the working directory; built-in defaults otherwise."""
        path = Path('config/config.yaml')
        if path.exists():
            return str(path)
        return None

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(path, 'r') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    def _merge_env_overrides(self):
        """Override config values with environment variables if present."""
        for env_name, section, key, convert in self.ENV_OVERRIDES:
            raw = os.getenv(env_name)
            if not raw:
                continue
            try:
                self.config.setdefault(section, {})[key] = convert(raw)
            except ValueError as e:
                raise ConfigurationError(f"Invalid value for {env_name}: {raw!r}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Example: config.get('profiling.sample_values')
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

            if value is None:
                return default

        return value

    def get_all(self) -> Dict[str, Any]:
        """Get entire configuration dictionary."""
        return self.config

    def get_reader_options(self) -> Dict[str, Any]:
        """Keyword arguments for readers.create_reader."""
        return {
            'delimiter': self.get('reading.csv_delimiter'),
            'encoding': self.get('reading.encoding', 'utf-8'),
            'sample_rows': int(self.get('reading.sample_rows', 10)),
            'batch_size': int(self.get('reading.parquet_batch_size', 10000)),
        }

    def get_profiler_options(self) -> Dict[str, Any]:
        """Keyword arguments for FileProfiler."""
        return {
            'sort_fields': bool(self.get('profiling.sort_fields', True)),
            'sample_size': int(self.get('profiling.sample_values', 5)),
            'least_frequent': bool(self.get('profiling.least_frequent', False)),
            'threaded': bool(self.get('pipeline.threaded', False)),
        }
