"""
Classifier component - Score band definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Category = Literal[
    "Deficient",
    "Needs improvement",
    "Good work",
    "Outstanding",
    "Out of range",
]

OUT_OF_RANGE: Category = "Out of range"


@dataclass(frozen=True)
class ScoreBand:
    """
    One contiguous score band.

    A band covers ``lower <= score < upper``; the top band also includes
    ``upper`` itself.
    """

    label: Category
    lower: float
    upper: float
    upper_inclusive: bool = False

    def contains(self, score: float) -> bool:
        if score < self.lower:
            return False
        if self.upper_inclusive:
            return score <= self.upper
        return score < self.upper


# Printed ranges: 1.0-3.9, 4.0-5.5, 5.6-6.4, 6.5-7.0
SCORE_BANDS: tuple[ScoreBand, ...] = (
    ScoreBand(label="Deficient", lower=1.0, upper=4.0),
    ScoreBand(label="Needs improvement", lower=4.0, upper=5.6),
    ScoreBand(label="Good work", lower=5.6, upper=6.5),
    ScoreBand(label="Outstanding", lower=6.5, upper=7.0, upper_inclusive=True),
)

CATEGORIES: tuple[Category, ...] = tuple(band.label for band in SCORE_BANDS)

SCORE_MIN = SCORE_BANDS[0].lower
SCORE_MAX = SCORE_BANDS[-1].upper
