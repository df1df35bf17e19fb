"""Frequency Screener - scores images by high/low frequency energy ratio."""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import numpy as np
from pydantic import Field
from pydantic.dataclasses import dataclass

from frequency_screener.constants import DEFAULT_EPSILON, DEFAULT_EXTENSIONS
from frequency_screener.dataset import DatasetIterator, SplitLabel
from frequency_screener.errors import InvalidInputError
from frequency_screener.preprocessing import ImageLoader
from frequency_screener.signal_builder import build_signal
from frequency_screener.spectral import SpectralScorer
from frequency_screener.results import ScoreResult

logger = logging.getLogger(__name__)

__all__ = ['FrequencyScreener']


@dataclass
class FrequencyScreener:
    """
    Scores images by the ratio of high- to low-frequency spectral energy.

    Each image is flattened row-major into a 1D signal, transformed with a
    1D DFT, and reduced to ``high_energy / (low_energy + epsilon)``. Images
    are scored independently; nothing is retained between calls.
    """

    epsilon: float = Field(default=DEFAULT_EPSILON, gt=0.0)
    extensions: Tuple[str, ...] = Field(default=DEFAULT_EXTENSIONS, min_length=1)

    def __post_init__(self):
        """Initialize sub-processors."""
        self.loader = ImageLoader(extensions=self.extensions)
        self.scorer = SpectralScorer(epsilon=self.epsilon)

    def analyze_array(
        self,
        image: np.ndarray,
        image_path: Union[str, Path] = "",
        split: str = "",
        label: str = "",
    ) -> ScoreResult:
        """
        Score an already decoded grayscale image.

        Args:
            image: Grayscale uint8 image (H, W)
            image_path: Identifier reported alongside the score
            split: Dataset split the image belongs to, if any
            label: Dataset label the image belongs to, if any

        Returns:
            ScoreResult for the image
        """
        signal = build_signal(image)
        analysis = self.scorer.analyze(signal)

        result = ScoreResult.from_analysis(
            analysis, image_path, np.shape(image), split=split, label=label
        )

        logger.debug(
            f"Scored {result.name or '<array>'}: score={result.score:.4f}, "
            f"low={result.low_energy:.4f}, high={result.high_energy:.4f}"
        )

        return result

    def analyze(self, image_path: Union[str, Path]) -> ScoreResult:
        """
        Load and score an image file.

        Args:
            image_path: Path to the image file

        Returns:
            ScoreResult for the image
        """
        logger.info(f"Analyzing image: {image_path}")
        image = self.loader.load_image(image_path)
        return self.analyze_array(image, image_path)

    def batch_analyze(self, image_paths: List[Union[str, Path]]) -> List[ScoreResult]:
        """
        Analyze multiple images in batch.

        Args:
            image_paths: List of paths to image files

        Returns:
            List of ScoreResult objects, in input order
        """
        logger.info(f"Batch analyzing {len(image_paths)} images")
        return [self.analyze(path) for path in image_paths]

    def score_pair(
        self, dataset: DatasetIterator, pair: SplitLabel
    ) -> Iterator[ScoreResult]:
        """Yield a ScoreResult for every image of one (split, label) directory."""
        for path, image in dataset.iter_pair(pair):
            try:
                result = self.analyze_array(image, path, split=pair.split, label=pair.label)
            except InvalidInputError as e:
                raise InvalidInputError(f"Cannot score {path}: {e}") from e
            yield result

    def score_dataset(self, dataset: DatasetIterator) -> Iterator[Tuple[SplitLabel, ScoreResult]]:
        """
        Score every image of a dataset, pair by pair.

        Args:
            dataset: Iterator over the configured (split, label) directories

        Yields:
            (pair, ScoreResult) tuples in dataset order

        Raises:
            DatasetIOError: On the first unreadable directory or undecodable file
        """
        for pair in dataset.config.pairs:
            for result in self.score_pair(dataset, pair):
                yield pair, result
