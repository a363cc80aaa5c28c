"""
Persistence component - Collections persisted as JSON in a key-value store.
"""

from .component import (
    JsonCollectionRepository,
    create_item_repository,
    create_student_repository,
)
from .ports import KeyValueStorePort, StorageError

__all__ = [
    "JsonCollectionRepository",
    "create_student_repository",
    "create_item_repository",
    # Ports
    "KeyValueStorePort",
    "StorageError",
]
