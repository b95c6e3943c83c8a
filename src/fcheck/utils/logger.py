"""Logging setup for fcheck."""

import logging
import logging.config
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

LOGGER_NAME = 'fcheck'
LOG_CONFIG_ENV = 'FCHECK_LOG_CONFIG'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def find_logging_config() -> Optional[Path]:
    """
    Locate the logging YAML.

    ``FCHECK_LOG_CONFIG`` wins, then ``config/logging.yaml`` in the working
    directory, then the one shipped next to the source tree.
    """
    env_path = os.getenv(LOG_CONFIG_ENV)
    candidates = [Path(env_path)] if env_path else []
    candidates += [
        Path('config/logging.yaml'),
        Path(__file__).parent.parent.parent.parent / 'config' / 'logging.yaml',
    ]
    for path in candidates:
        if path.exists():
            return path
    return None


def _prepare_file_handlers(config: Dict[str, Any]) -> None:
    # dictConfig opens file handlers immediately, so their directory must exist
    for handler in config.get('handlers', {}).values():
        if 'filename' in handler:
            Path(handler['filename']).parent.mkdir(parents=True, exist_ok=True)


def setup_logging(
    config_path: Optional[str] = None,
    default_level: Union[int, str] = logging.WARNING,
    verbose: bool = False
) -> logging.Logger:
    """
    Configure logging for a profiling run.

    Args:
        config_path: Path to a logging YAML; located with find_logging_config when omitted
        default_level: Level for the basicConfig fallback when no YAML is found
        verbose: Lower the fcheck logger and its handlers to DEBUG

    Returns:
        The ``fcheck`` package logger
    """
    path = Path(config_path) if config_path else find_logging_config()

    if path is not None and path.exists():
        with open(path, 'r') as f:
            config = yaml.safe_load(f) or {}
        _prepare_file_handlers(config)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(level=default_level, format=LOG_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    if verbose:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.DEBUG)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger below the ``fcheck`` package logger."""
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
