"""Exception hierarchy for file checking runs.

Every error carries the stage that failed (``inference``, ``streaming`` or
``aggregation``) so the command line can tell the user where the run stopped.
"""

from typing import Optional


class FileCheckError(Exception):
    """Base class for all errors raised by fcheck."""

    stage = 'streaming'

    def __init__(self, message: str, stage: Optional[str] = None):
        self.message = message
        if stage is not None:
            self.stage = stage
        super().__init__(message)


class ConfigurationError(FileCheckError):
    """Unsupported input or missing information needed before any row is read."""

    stage = 'inference'


class UnsupportedFormatError(ConfigurationError):
    """The file type could not be detected or has no reader."""


class SampleError(ConfigurationError):
    """The sample used for schema inference is too small or malformed."""


class ResourceError(FileCheckError):
    """The file cannot be opened or read."""


class DecodeError(FileCheckError):
    """A record in the underlying container could not be decoded."""


class ContractViolationError(FileCheckError):
    """A value disagrees with the type declared for its column."""

    stage = 'aggregation'


class ReaderStateError(FileCheckError):
    """A reader method was called out of order."""
