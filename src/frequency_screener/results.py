"""Shared result types for frequency screening."""

from pathlib import Path
from typing import NamedTuple, Tuple, Union


class BandEnergies(NamedTuple):
    """Magnitude sums of the low and high spectral bands."""

    low_energy: float  # Sum of |X[i]| for i < split_index
    high_energy: float  # Sum of |X[i]| for i >= split_index
    split_index: int  # First high-band bin (N // 4)
    num_bins: int


class SpectralAnalysis(NamedTuple):
    """Full output of scoring a single sample sequence."""

    score: float  # high_energy / (low_energy + epsilon)
    low_energy: float
    high_energy: float
    split_index: int
    num_samples: int


class ScoreResult(NamedTuple):
    """Score of one image together with its identifying metadata."""

    image_path: str
    name: str  # Identifier used in the textual report (file name)
    split: str  # Empty when the image did not come from a dataset
    label: str
    width: int
    height: int
    score: float
    low_energy: float
    high_energy: float

    @classmethod
    def from_analysis(
        cls,
        analysis: SpectralAnalysis,
        image_path: Union[str, Path],
        shape: Tuple[int, int],
        split: str = "",
        label: str = "",
    ) -> "ScoreResult":
        height, width = shape
        return cls(
            image_path=str(image_path),
            name=Path(image_path).name,
            width=width,
            height=height,
            score=analysis.score,
            low_energy=analysis.low_energy,
            high_energy=analysis.high_energy,
            split=split,
            label=label,
        )
