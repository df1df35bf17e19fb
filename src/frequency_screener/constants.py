"""Shared constants for frequency screening."""

# Signal Builder
INTENSITY_SCALE = 255.0  # Divisor mapping 8-bit intensities onto [0, 1]
MIN_INTENSITY = 0
MAX_INTENSITY = 255

# Spectral Scorer
LOW_BAND_DIVISOR = 4  # Bins with index < N // 4 form the low band
DEFAULT_EPSILON = 1e-9  # Guards the ratio denominator when the low band is empty

# Dataset layout: <root>/<split>/<label>/*<ext>
DEFAULT_DATASET_ROOT = "dataset"
DEFAULT_SPLIT_LABEL_PAIRS = (
    ("train", "fake"),
    ("train", "real"),
    ("test", "fake"),
    ("test", "real"),
)
DEFAULT_EXTENSIONS = (".jpg",)

# Report
FILENAME_COLUMN_WIDTH = 20
SCORE_DECIMALS = 4
