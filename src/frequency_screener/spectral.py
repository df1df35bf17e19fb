"""1D Discrete Fourier Transform scoring of flattened image signals."""

import logging

import numpy as np
from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from frequency_screener.constants import DEFAULT_EPSILON, LOW_BAND_DIVISOR
from frequency_screener.errors import InvalidInputError, UnsupportedSignalLengthError
from frequency_screener.results import BandEnergies, SpectralAnalysis

logger = logging.getLogger(__name__)

__all__ = ['SpectralScorer', 'spectral_score', 'low_band_split']


def low_band_split(num_bins: int) -> int:
    """
    Get the index of the first high-frequency bin.

    Bins ``[0, N // 4)`` form the low band. The bin at exactly ``N // 4``
    belongs to the high band.

    Args:
        num_bins: Spectrum length N

    Returns:
        N // 4
    """
    return num_bins // LOW_BAND_DIVISOR


@pydantic_dataclass
class SpectralScorer:
    """Reduces the DFT of a sample sequence to a high/low band energy ratio."""

    epsilon: float = Field(default=DEFAULT_EPSILON, gt=0.0)

    @field_validator("epsilon")
    @classmethod
    def validate_epsilon(cls, v: float) -> float:
        """Ensure epsilon is finite."""
        if not np.isfinite(v):
            raise ValueError("Epsilon must be finite")
        return v

    def compute_dft(self, signal: np.ndarray) -> np.ndarray:
        """
        Compute the forward DFT of a real sample sequence.

        Samples are embedded as complex values with zero imaginary part and
        transformed at exactly their own length (no padding, no truncation).
        numpy's FFT handles arbitrary lengths, including primes.

        Args:
            signal: 1D sample sequence, float64 [0, 1]

        Returns:
            Complex-valued spectrum of the same length

        Raises:
            UnsupportedSignalLengthError: If the signal is empty
            InvalidInputError: If the signal is not 1D, is complex, or holds
                non-finite or out-of-range samples
        """
        signal = np.asarray(signal)

        if signal.ndim != 1:
            raise InvalidInputError(
                f"Expected 1D signal, got {signal.ndim}D array with shape {signal.shape}"
            )
        if signal.size == 0:
            raise UnsupportedSignalLengthError(0)
        if np.iscomplexobj(signal):
            raise InvalidInputError(f"Expected real samples, got dtype {signal.dtype}")
        if not np.all(np.isfinite(signal)):
            raise InvalidInputError("Signal contains non-finite samples")
        if signal.min() < 0.0 or signal.max() > 1.0:
            raise InvalidInputError(
                f"Samples must lie in [0.0, 1.0], got [{signal.min()}, {signal.max()}]"
            )

        buffer = signal.astype(np.complex128)

        logger.debug(f"Computing 1D FFT of length {buffer.size}")
        spectrum = np.fft.fft(buffer, n=buffer.size)
        return spectrum

    def band_energies(self, spectrum: np.ndarray) -> BandEnergies:
        """
        Sum bin magnitudes into low and high frequency bands.

        Energy here is the sum of amplitudes |X[i]|, not of squared
        magnitudes; the ratio's scale depends on that.

        Args:
            spectrum: Complex-valued 1D spectrum

        Returns:
            BandEnergies with both sums and the split index
        """
        num_bins = len(spectrum)
        split_index = low_band_split(num_bins)
        magnitude = np.abs(spectrum).astype(np.float64)

        low_energy = float(magnitude[:split_index].sum())
        high_energy = float(magnitude[split_index:].sum())

        logger.debug(
            f"Band energies over {num_bins} bins (split at {split_index}): "
            f"low={low_energy:.6f}, high={high_energy:.6f}"
        )

        return BandEnergies(
            low_energy=low_energy,
            high_energy=high_energy,
            split_index=split_index,
            num_bins=num_bins,
        )

    def ratio(self, energies: BandEnergies) -> float:
        """Return high_energy / (low_energy + epsilon)."""
        return energies.high_energy / (energies.low_energy + self.epsilon)

    def analyze(self, signal: np.ndarray) -> SpectralAnalysis:
        """
        Complete scoring pipeline: transform, band reduction, ratio.

        Args:
            signal: 1D sample sequence

        Returns:
            SpectralAnalysis with the score and intermediate energies
        """
        spectrum = self.compute_dft(signal)
        energies = self.band_energies(spectrum)

        return SpectralAnalysis(
            score=self.ratio(energies),
            low_energy=energies.low_energy,
            high_energy=energies.high_energy,
            split_index=energies.split_index,
            num_samples=energies.num_bins,
        )

    def score(self, signal: np.ndarray) -> float:
        """Score a sample sequence."""
        return self.analyze(signal).score


def spectral_score(signal: np.ndarray) -> float:
    """
    Score a sample sequence with the default epsilon.

    Args:
        signal: 1D sample sequence produced by ``build_signal``

    Returns:
        Finite, non-negative high/low frequency energy ratio
    """
    return SpectralScorer().score(signal)
