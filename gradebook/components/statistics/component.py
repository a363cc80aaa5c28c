"""
Statistics component - Count, average and category distribution.

Functional Core - aggregate() reads the collection it is given and
returns a new value; it never touches store state.

Invariants:
- sum of distribution counts == count
- only categories present in the collection appear in the distribution
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import fsum

from gradebook.components.classifier import CATEGORIES, OUT_OF_RANGE
from gradebook.domain.entities import Student

from .models import CategoryShare, CollectionStatistics

# Display order for the distribution
_CATEGORY_ORDER = (*CATEGORIES, OUT_OF_RANGE)


def aggregate(students: Sequence[Student]) -> CollectionStatistics | None:
    """
    Aggregate a collection.

    Returns None for an empty collection; callers skip statistics entirely.
    """
    total = len(students)
    if total == 0:
        return None

    counts = Counter(student.category for student in students)
    distribution = {
        category: CategoryShare(count=counts[category], percentage=100 * counts[category] / total)
        for category in _CATEGORY_ORDER
        if counts[category]
    }

    return CollectionStatistics(
        count=total,
        average_score=fsum(student.score for student in students) / total,
        distribution=distribution,
    )


def format_statistics(stats: CollectionStatistics | None) -> list[str]:
    """Render statistics as display lines: average to 2 places, shares to 1."""
    if stats is None:
        return []

    lines = [
        f"Total students: {stats.count}",
        f"Overall average: {stats.average_score:.2f}",
    ]
    for category, share in stats.distribution.items():
        lines.append(f"{category}: {share.count} ({share.percentage:.1f}%)")
    return lines
