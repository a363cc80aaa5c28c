"""
Items component - Generic labeled items.

The single-field variant of the record manager: an item is just an id
and a free-text value. Lifecycle and persistence are shared with the
student store.
"""

from __future__ import annotations

from gradebook.components.store import EntityStore
from gradebook.domain.entities import Item, ItemFields


class ItemStore(EntityStore[Item, ItemFields]):
    """Store of generic items."""

    def _build(self, entity_id: int, fields: ItemFields) -> Item:
        return Item(id=entity_id, value=fields.value)

    def _fields_of(self, entity: Item) -> ItemFields:
        return ItemFields(value=entity.value)
