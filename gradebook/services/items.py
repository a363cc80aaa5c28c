"""
ItemService - presentation surface for generic labeled items.
"""

from __future__ import annotations

import logging

from gradebook.components.items import ItemStore
from gradebook.components.store import ConfirmPort
from gradebook.components.validation import (
    ItemFormInput,
    form_from_item,
    parse_item_form,
    validate_item,
)
from gradebook.domain.entities import Item, ItemFields

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this item?"


class ItemService:
    def __init__(self, store: ItemStore) -> None:
        self.store = store

    def get_collection(self) -> tuple[Item, ...]:
        return self.store.collection

    def get_edit_selection(self) -> Item | None:
        return self.store.edit_selection

    def get_item(self, item_id: int) -> Item | None:
        return self.store.get(item_id)

    def edit_form(self) -> ItemFormInput:
        return form_from_item(self.store.edit_selection)

    def validate(self, form: ItemFormInput) -> dict[str, str]:
        return validate_item(form)

    def add_or_update(self, fields: ItemFields) -> Item:
        return self.store.add_or_update(fields)

    def submit(self, form: ItemFormInput) -> tuple[Item | None, dict[str, str]]:
        errors = self.validate(form)
        if errors:
            return None, errors
        return self.add_or_update(parse_item_form(form)), {}

    def delete(self, item_id: int, confirm: ConfirmPort | None = None) -> bool:
        if confirm is not None and not confirm.confirm(DELETE_PROMPT):
            logger.info("Deletion of item %s cancelled", item_id)
            return False
        return self.store.delete(item_id)

    def select_for_edit(self, item: Item) -> bool:
        return self.store.select_for_edit(item)

    def cancel_edit(self) -> None:
        self.store.cancel_edit()
