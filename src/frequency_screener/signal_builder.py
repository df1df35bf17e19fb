"""Signal Builder: flattens a grayscale image into a 1D sample sequence."""

import logging

import numpy as np

from frequency_screener.constants import INTENSITY_SCALE, MAX_INTENSITY, MIN_INTENSITY
from frequency_screener.errors import InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ['build_signal']


def build_signal(image: np.ndarray) -> np.ndarray:
    """
    Flatten a grayscale image into a normalized 1D signal.

    Pixels are read row-major (row 0 left to right, then row 1, ...). The
    order determines which spatial structure lands in the low and high
    spectral bands, so it must not change.

    Args:
        image: Grayscale image array (H, W) with intensities in [0, 255]

    Returns:
        float64 array of length H * W with values in [0.0, 1.0]

    Raises:
        InvalidInputError: If image is not 2D, is empty, is not an integer
            array, or holds intensities outside [0, 255]
    """
    image = np.asarray(image)

    if image.ndim != 2:
        raise InvalidInputError(
            f"Expected 2D array, got {image.ndim}D array with shape {image.shape}"
        )
    if image.size == 0:
        raise InvalidInputError(f"Image has zero area: shape {image.shape}")
    if not (np.issubdtype(image.dtype, np.integer) or image.dtype == np.bool_):
        raise InvalidInputError(f"Expected integer intensities, got dtype {image.dtype}")
    if image.min() < MIN_INTENSITY or image.max() > MAX_INTENSITY:
        raise InvalidInputError(
            f"Intensities must lie in [{MIN_INTENSITY}, {MAX_INTENSITY}], "
            f"got [{image.min()}, {image.max()}]"
        )

    samples = image.astype(np.float64).ravel(order="C") / INTENSITY_SCALE

    logger.debug(f"Built signal of {samples.size} samples from image shape {image.shape}")

    return samples
