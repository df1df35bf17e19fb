"""Dataset traversal over a ``<root>/<split>/<label>/*<ext>`` directory layout."""

import logging
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np
from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

from frequency_screener.constants import (
    DEFAULT_DATASET_ROOT,
    DEFAULT_EXTENSIONS,
    DEFAULT_SPLIT_LABEL_PAIRS,
)
from frequency_screener.errors import DatasetIOError
from frequency_screener.preprocessing import ImageLoader, check_extensions

logger = logging.getLogger(__name__)

__all__ = ['SplitLabel', 'DatasetConfig', 'DatasetIterator']


class SplitLabel(NamedTuple):
    """A (split, label) pair naming one leaf directory of the dataset."""

    split: str  # e.g. "train" or "test"
    label: str  # e.g. "fake" or "real"

    @classmethod
    def parse(cls, text: str) -> "SplitLabel":
        """Parse ``"split/label"`` into a SplitLabel."""
        parts = text.split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Expected SPLIT/LABEL, got {text!r}")
        return cls(split=parts[0], label=parts[1])

    def __str__(self) -> str:
        return f"{self.split}/{self.label}"


def _default_pairs() -> Tuple[SplitLabel, ...]:
    return tuple(SplitLabel(split, label) for split, label in DEFAULT_SPLIT_LABEL_PAIRS)


@dataclass
class DatasetConfig:
    """Location and layout of a labeled, split image dataset."""

    root: Path = Field(default=Path(DEFAULT_DATASET_ROOT))
    pairs: Tuple[SplitLabel, ...] = Field(default_factory=_default_pairs, min_length=1)
    extensions: Tuple[str, ...] = Field(default=DEFAULT_EXTENSIONS, min_length=1)

    @field_validator("pairs")
    @classmethod
    def validate_pairs(cls, v: Tuple[SplitLabel, ...]) -> Tuple[SplitLabel, ...]:
        """Ensure split and label names are single path components."""
        for pair in v:
            for part in pair:
                if not part or "/" in part or "\\" in part or part in (".", ".."):
                    raise ValueError(f"Invalid split/label component: {part!r}")
        return v

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure every extension carries its leading dot."""
        return check_extensions(v)


class DatasetIterator:
    """
    Enumerates and decodes the images of each (split, label) directory.

    Any directory read or decode failure raises DatasetIOError; nothing is
    skipped except files whose extension is not accepted.
    """

    def __init__(self, config: DatasetConfig, loader: Optional[ImageLoader] = None):
        self.config = config
        self.loader = loader or ImageLoader(extensions=config.extensions)

    def directory_for(self, pair: SplitLabel) -> Path:
        """Get the directory holding the images of one (split, label) pair."""
        return Path(self.config.root) / pair.split / pair.label

    def list_files(self, pair: SplitLabel) -> List[Path]:
        """
        List accepted image files for a pair, sorted by file name.

        Args:
            pair: (split, label) pair to enumerate

        Returns:
            Sorted list of paths whose suffix is an accepted extension

        Raises:
            DatasetIOError: If the directory is missing or cannot be read
        """
        directory = self.directory_for(pair)
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DatasetIOError(f"Failed to read directory {directory}: {e}", path=directory) from e

        files = [entry for entry in entries if self.loader.accepts(entry)]

        skipped = len(entries) - len(files)
        if skipped:
            logger.debug(f"Skipped {skipped} entries with unaccepted extensions in {directory}")
        logger.info(f"Found {len(files)} images in {directory}")

        return files

    def iter_pair(self, pair: SplitLabel) -> Iterator[Tuple[Path, np.ndarray]]:
        """
        Yield (path, grayscale image) for every accepted file of one pair.

        Raises:
            DatasetIOError: On the first directory or decode failure
        """
        for path in self.list_files(pair):
            yield path, self.loader.load_image(path)

    def __iter__(self) -> Iterator[Tuple[SplitLabel, Path, np.ndarray]]:
        for pair in self.config.pairs:
            for path, image in self.iter_pair(pair):
                yield pair, path, image
