"""
Items component - Generic labeled item lifecycle.
"""

from .component import ItemStore

__all__ = ["ItemStore"]
