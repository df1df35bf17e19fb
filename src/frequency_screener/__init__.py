"""Frequency Screener - high/low frequency energy scoring of still images"""

__version__ = "0.1.0"

from .errors import (
    DatasetIOError,
    FrequencyScreenerError,
    InvalidInputError,
    UnsupportedSignalLengthError,
)
from .frequency_detector import FrequencyScreener
from .signal_builder import build_signal
from .spectral import SpectralScorer, spectral_score

__all__ = [
    "FrequencyScreener",
    "SpectralScorer",
    "build_signal",
    "spectral_score",
    "FrequencyScreenerError",
    "InvalidInputError",
    "UnsupportedSignalLengthError",
    "DatasetIOError",
]
