"""
Classifier component - Score to category classification.
"""

from .component import band_for, classify
from .models import (
    CATEGORIES,
    OUT_OF_RANGE,
    SCORE_BANDS,
    SCORE_MAX,
    SCORE_MIN,
    Category,
    ScoreBand,
)

__all__ = [
    # Entry points
    "classify",
    "band_for",
    # Models
    "Category",
    "ScoreBand",
    # Constants
    "CATEGORIES",
    "OUT_OF_RANGE",
    "SCORE_BANDS",
    "SCORE_MIN",
    "SCORE_MAX",
]
