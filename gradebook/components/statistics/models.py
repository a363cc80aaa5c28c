"""
Statistics component - Aggregate result models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryShare:
    """How many entities fall in one category, and their share of the total."""

    count: int
    percentage: float


@dataclass(frozen=True)
class CollectionStatistics:
    """
    Statistics for a non-empty collection.

    Values are unrounded; formatting belongs to the presentation layer.
    """

    count: int
    average_score: float
    distribution: Mapping[str, CategoryShare]
