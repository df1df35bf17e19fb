"""Exception hierarchy for frequency screening.

Core functions raise immediately on malformed input and never substitute a
default score. The dataset collaborator wraps filesystem and decode failures
in ``DatasetIOError`` so the batch driver can stop the run on the first one.
"""

from pathlib import Path
from typing import Optional, Union

__all__ = [
    'FrequencyScreenerError',
    'InvalidInputError',
    'UnsupportedSignalLengthError',
    'DatasetIOError',
]


class FrequencyScreenerError(Exception):
    """Base class for all frequency screener errors."""


class InvalidInputError(FrequencyScreenerError, ValueError):
    """Raised for degenerate or malformed images and sample sequences."""


class UnsupportedSignalLengthError(FrequencyScreenerError, ValueError):
    """Raised when the transform cannot process a signal of the given length."""

    def __init__(self, length: int, message: Optional[str] = None):
        self.length = length
        super().__init__(message or f"Unsupported signal length for DFT: {length}")


class DatasetIOError(FrequencyScreenerError, OSError):
    """Raised when a dataset directory cannot be read or an image cannot be decoded."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""
