"""
Statistics component - Derived collection statistics.
"""

from .component import aggregate, format_statistics
from .models import CategoryShare, CollectionStatistics

__all__ = [
    "aggregate",
    "format_statistics",
    "CategoryShare",
    "CollectionStatistics",
]
