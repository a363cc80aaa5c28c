"""
Store component - Entity lifecycle and edit selection.
"""

from .component import EntityStore, MonotonicIdGenerator, StudentStore
from .ports import ClockPort, ConfirmPort, IdGeneratorPort, RepositoryPort

__all__ = [
    # Stores
    "EntityStore",
    "StudentStore",
    "MonotonicIdGenerator",
    # Ports
    "RepositoryPort",
    "IdGeneratorPort",
    "ClockPort",
    "ConfirmPort",
]
