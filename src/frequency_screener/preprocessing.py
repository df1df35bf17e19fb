"""Image loading utilities for frequency screening."""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image
from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

from frequency_screener.constants import DEFAULT_EXTENSIONS
from frequency_screener.errors import DatasetIOError

logger = logging.getLogger(__name__)


def check_extensions(extensions: Tuple[str, ...]) -> Tuple[str, ...]:
    """Ensure every extension carries its leading dot, e.g. '.jpg'."""
    for ext in extensions:
        if not ext.startswith(".") or len(ext) < 2:
            raise ValueError(f"Extension must look like '.jpg', got {ext!r}")
    return extensions


@dataclass
class ImageLoader:
    """Decodes image files into 8-bit grayscale arrays."""

    extensions: Tuple[str, ...] = Field(default=DEFAULT_EXTENSIONS, min_length=1)

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure every extension carries its leading dot."""
        return check_extensions(v)

    def accepts(self, image_path: Union[str, Path]) -> bool:
        """Check whether a file's suffix is one of the accepted extensions (case-sensitive)."""
        return Path(image_path).suffix in self.extensions

    def load_image(self, image_path: Union[str, Path]) -> np.ndarray:
        """
        Load an image from disk and convert to grayscale.

        Args:
            image_path: Path to the image file

        Returns:
            Grayscale image as uint8 numpy array (H, W)

        Raises:
            DatasetIOError: If the file is missing, unreadable or cannot be decoded
        """
        path = Path(image_path)
        if not path.is_file():
            raise DatasetIOError(f"Image not found: {image_path}", path=path)

        logger.debug(f"Loading image: {image_path}")
        try:
            with Image.open(path) as img:
                # verify() leaves the image unusable, so it is reopened below
                img.verify()
            with Image.open(path) as img:
                if img.mode != "L":
                    logger.debug(f"Converting image from {img.mode} to grayscale")
                    img = img.convert("L")
                img_array = np.array(img, dtype=np.uint8)
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
            raise DatasetIOError(f"Failed to decode image {image_path}: {e}", path=path) from e

        if img_array.ndim != 2:
            raise DatasetIOError(
                f"Decoded image {image_path} is not single-channel: shape {img_array.shape}",
                path=path,
            )

        return img_array
