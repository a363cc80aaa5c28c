"""
Store component - In-memory owner of a collection and its edit selection.

Every write goes through add_or_update or delete, and is followed by a
save of the whole collection. Entities are frozen pydantic models rebuilt
on each write, so derived fields (a student's category) are recomputed
from their source fields every time.

Invariants:
- ids are unique within the collection
- the edit selection, when set, names an id present in the collection
- save is called strictly after the mutation it persists
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, Self, TypeVar

from pydantic import BaseModel

from gradebook.domain.entities import Student, StudentFields

from .ports import ClockPort, EntityT, IdGeneratorPort, RepositoryPort

logger = logging.getLogger(__name__)

FieldsT = TypeVar("FieldsT", bound=BaseModel)


# --- Id Generation ---


class MonotonicIdGenerator:
    """
    Time-shaped, strictly increasing ids.

    Ids are millisecond timestamps, bumped past the last issued or observed
    id so two additions within the same millisecond never collide.
    """

    def __init__(self, clock: ClockPort | None = None) -> None:
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        now_ms = self._now_ms()
        self._last = max(now_ms, self._last + 1)
        return self._last

    def observe(self, existing_id: int) -> None:
        self._last = max(self._last, existing_id)

    def _now_ms(self) -> int:
        if self._clock is None:
            return time.time_ns() // 1_000_000
        return int(self._clock.now_utc().timestamp() * 1000)


# --- Entity Store ---


class EntityStore(ABC, Generic[EntityT, FieldsT]):
    """
    Ordered collection plus edit selection.

    Subclasses decide how an entity is built from its id and fields.
    """

    def __init__(
        self,
        repo: RepositoryPort[EntityT],
        *,
        id_generator: IdGeneratorPort | None = None,
        initial: Iterable[EntityT] = (),
    ) -> None:
        """
        Raises:
            ValueError: if ``initial`` repeats an id. A guard for direct
                construction only; repositories drop duplicate-id payloads
                on load, so from_repository never reaches it.
        """
        self._repo = repo
        self._id_generator = id_generator or MonotonicIdGenerator()
        self._entities: list[EntityT] = []
        self._selected_id: int | None = None

        for entity in initial:
            entity_id = self._id_of(entity)
            if self.get(entity_id) is not None:
                raise ValueError(f"Duplicate id {entity_id} in initial collection")
            # Rebuild so derived fields never come from the caller.
            self._entities.append(self._build(entity_id, self._fields_of(entity)))
            self._id_generator.observe(entity_id)

    @classmethod
    def from_repository(
        cls,
        repo: RepositoryPort[EntityT],
        *,
        id_generator: IdGeneratorPort | None = None,
    ) -> Self:
        """Create a store seeded with whatever the repository loads."""
        return cls(repo, id_generator=id_generator, initial=repo.load())

    # --- Entity hooks ---

    @abstractmethod
    def _build(self, entity_id: int, fields: FieldsT) -> EntityT:
        ...

    @abstractmethod
    def _fields_of(self, entity: EntityT) -> FieldsT:
        ...

    @staticmethod
    def _id_of(entity: EntityT) -> int:
        entity_id: int = entity.id  # type: ignore[attr-defined]
        return entity_id

    # --- Reads ---

    @property
    def collection(self) -> tuple[EntityT, ...]:
        """Entities in display (insertion) order."""
        return tuple(self._entities)

    @property
    def edit_selection(self) -> EntityT | None:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def get(self, entity_id: int) -> EntityT | None:
        return next((e for e in self._entities if self._id_of(e) == entity_id), None)

    def __len__(self) -> int:
        return len(self._entities)

    # --- Writes ---

    def add_or_update(self, fields: FieldsT) -> EntityT:
        """
        Update the selected entity, or append a new one when nothing is selected.

        Fields must already have passed validation.
        """
        if self._selected_id is not None:
            entity = self._replace(self._selected_id, fields)
            self._selected_id = None
            logger.debug("Updated entity %s", self._id_of(entity))
        else:
            entity = self._build(self._id_generator.next_id(), fields)
            self._entities.append(entity)
            logger.debug("Added entity %s", self._id_of(entity))

        self._persist()
        return entity

    def delete(self, entity_id: int) -> bool:
        """Remove an entity. Returns False (and saves nothing) if absent."""
        index = self._index_of(entity_id)
        if index is None:
            logger.warning("Delete ignored: no entity with id %s", entity_id)
            return False

        del self._entities[index]
        if self._selected_id == entity_id:
            self._selected_id = None

        self._persist()
        return True

    def select_for_edit(self, entity: EntityT) -> bool:
        """Load an entity into the form. Not persisted."""
        entity_id = self._id_of(entity)
        if self._index_of(entity_id) is None:
            logger.warning("Select ignored: no entity with id %s", entity_id)
            return False
        self._selected_id = entity_id
        return True

    def cancel_edit(self) -> None:
        self._selected_id = None

    # --- Internals ---

    def _index_of(self, entity_id: int) -> int | None:
        return next(
            (i for i, e in enumerate(self._entities) if self._id_of(e) == entity_id),
            None,
        )

    def _replace(self, entity_id: int, fields: FieldsT) -> EntityT:
        index = self._index_of(entity_id)
        # The selection is cleared whenever its entity is deleted.
        assert index is not None, f"selected id {entity_id} missing from collection"
        entity = self._build(entity_id, fields)
        self._entities[index] = entity
        return entity

    def _persist(self) -> None:
        if not self._repo.save(list(self._entities)):
            logger.warning(
                "Collection of %d entities kept in memory only; save failed",
                len(self._entities),
            )


class StudentStore(EntityStore[Student, StudentFields]):
    """Store of students; category is recomputed on every write."""

    def _build(self, entity_id: int, fields: StudentFields) -> Student:
        return Student(id=entity_id, name=fields.name, subject=fields.subject, score=fields.score)

    def _fields_of(self, entity: Student) -> StudentFields:
        return StudentFields(name=entity.name, subject=entity.subject, score=entity.score)
