"""
Store component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol, TypeVar

from pydantic import BaseModel

EntityT = TypeVar("EntityT", bound=BaseModel)


class RepositoryPort(Protocol[EntityT]):
    """Durable home of a collection; see the persistence component."""

    def load(self) -> list[EntityT]:
        """Load the stored collection, empty when nothing usable is stored."""
        ...

    def save(self, entities: Sequence[EntityT]) -> bool:
        """Persist the whole collection. Returns False if the write failed."""
        ...


class IdGeneratorPort(Protocol):
    """Source of entity ids."""

    def next_id(self) -> int:
        """Return an id never returned or observed before."""
        ...

    def observe(self, existing_id: int) -> None:
        """Record an id that is already in use."""
        ...


class ClockPort(Protocol):
    def now_utc(self) -> datetime:
        ...


class ConfirmPort(Protocol):
    """Asks the user to confirm a destructive action."""

    def confirm(self, message: str) -> bool:
        ...
