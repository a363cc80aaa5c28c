"""
Persistence component - JSON collection repository over a key-value store.

The whole collection lives in one named slot as a UTF-8 JSON array of
entity objects. Loading never fails: an absent slot, unreadable storage
or malformed payload all yield an empty collection. Saving never raises:
failures are logged and reported through the return value, leaving the
in-memory collection authoritative.

Derived fields written alongside an entity (a student's category) are
ignored on load and recomputed by the model.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from gradebook.domain.entities import Item, Student

from .ports import KeyValueStorePort, StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class JsonCollectionRepository(Generic[ModelT]):
    """Load and save a list of ``model`` instances in a single slot."""

    def __init__(
        self,
        storage: KeyValueStorePort,
        key: str,
        model: type[ModelT],
    ) -> None:
        self._storage = storage
        self.key = key
        self._adapter: TypeAdapter[list[ModelT]] = TypeAdapter(list[model])  # type: ignore[valid-type]

    def load(self) -> list[ModelT]:
        try:
            raw = self._storage.get(self.key)
        except StorageError as e:
            logger.error("Could not read slot %r, starting empty: %s", self.key, e)
            return []

        if raw is None:
            logger.info("No stored data in slot %r", self.key)
            return []

        try:
            entities = self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed data in slot %r (%d errors)", self.key, e.error_count()
            )
            return []

        ids = [getattr(entity, "id", None) for entity in entities]
        if len(set(ids)) != len(ids):
            logger.warning("Discarding data in slot %r: duplicate ids", self.key)
            return []

        logger.debug("Loaded %d entities from slot %r", len(entities), self.key)
        return entities

    def save(self, entities: Sequence[ModelT]) -> bool:
        payload = self._adapter.dump_json(list(entities))
        try:
            self._storage.set(self.key, payload)
        except StorageError as e:
            logger.error("Could not save %d entities to slot %r: %s", len(entities), self.key, e)
            return False

        logger.debug("Saved %d entities to slot %r", len(entities), self.key)
        return True


def create_student_repository(
    storage: KeyValueStorePort,
    key: str = "students",
) -> JsonCollectionRepository[Student]:
    return JsonCollectionRepository(storage, key, Student)


def create_item_repository(
    storage: KeyValueStorePort,
    key: str = "items",
) -> JsonCollectionRepository[Item]:
    return JsonCollectionRepository(storage, key, Item)
