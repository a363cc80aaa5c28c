"""
In-memory key-value store.

For tests and throwaway sessions; nothing survives the process.
"""

from __future__ import annotations


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._slots: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._slots.get(key)

    def set(self, key: str, data: bytes) -> None:
        self._slots[key] = bytes(data)

    def delete(self, key: str) -> bool:
        return self._slots.pop(key, None) is not None

    def keys(self) -> list[str]:
        """Occupied slot names. Not part of KeyValueStorePort; for test assertions."""
        return list(self._slots)
