"""
Classifier component - Map a numeric score to its category label.

Functional Core - pure, total, no side effects.
"""

from __future__ import annotations

import math
from typing import SupportsFloat

from .models import OUT_OF_RANGE, SCORE_BANDS, Category, ScoreBand


def _as_float(score: SupportsFloat | str | None) -> float | None:
    if score is None:
        return None
    try:
        value = float(score)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def band_for(score: SupportsFloat | str | None) -> ScoreBand | None:
    """Return the band containing ``score``, or None when out of range."""
    value = _as_float(score)
    if value is None:
        return None
    return next((band for band in SCORE_BANDS if band.contains(value)), None)


def classify(score: SupportsFloat | str | None) -> Category:
    """
    Classify a score.

    Never raises: NaN, infinities, unparseable values and anything outside
    the band table map to "Out of range".
    """
    band = band_for(score)
    if band is None:
        return OUT_OF_RANGE
    return band.label
