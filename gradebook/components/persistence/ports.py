"""
Persistence component - Key-value byte store interface.

Implementations: local filesystem and in-memory adapters.
"""

from __future__ import annotations

from typing import Protocol


class StorageError(Exception):
    """Base exception for key-value storage failures."""

    pass


class KeyValueStorePort(Protocol):
    """Named slots holding opaque bytes."""

    def get(self, key: str) -> bytes | None:
        """
        Read a slot.

        Returns:
            The stored bytes, or None if the slot was never written.

        Raises:
            StorageError: If the backend cannot be read.
        """
        ...

    def set(self, key: str, data: bytes) -> None:
        """
        Replace a slot's contents.

        Raises:
            StorageError: If the backend cannot be written.
        """
        ...

    def delete(self, key: str) -> bool:
        """Remove a slot. Returns False if it did not exist."""
        ...
