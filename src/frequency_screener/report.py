"""Plain-text report formatting for batch scoring runs."""

from frequency_screener.constants import FILENAME_COLUMN_WIDTH, SCORE_DECIMALS
from frequency_screener.dataset import SplitLabel

__all__ = ['format_section_header', 'format_score_line']


def format_section_header(pair: SplitLabel) -> str:
    """Format the header printed before each (split, label) section, e.g. ``"\\n[TRAIN / FAKE]"``."""
    return f"\n[{pair.split.upper()} / {pair.label.upper()}]"


def format_score_line(name: str, score: float) -> str:
    """Format one ``<filename>  score = <score>`` report line."""
    return f"{name:<{FILENAME_COLUMN_WIDTH}}  score = {score:.{SCORE_DECIMALS}f}"
