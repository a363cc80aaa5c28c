from __future__ import annotations

from dataclasses import dataclass

from gradebook.adapters.clock import SystemClock
from gradebook.adapters.local_storage import LocalKeyValueStore
from gradebook.app_shell.config import validation_limits
from gradebook.components.items import ItemStore
from gradebook.components.persistence import (
    KeyValueStorePort,
    create_item_repository,
    create_student_repository,
)
from gradebook.components.store import ClockPort, MonotonicIdGenerator, StudentStore
from gradebook.rules.models import Rules
from gradebook.services.gradebook import GradebookService
from gradebook.services.items import ItemService


@dataclass
class ServiceContext:
    gradebook: GradebookService
    items: ItemService
    storage: KeyValueStorePort
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        storage: KeyValueStorePort | None = None,
        clock: ClockPort | None = None,
    ) -> ServiceContext:
        """Wire stores and services; each store loads its slot once here."""
        if storage is None:
            storage = LocalKeyValueStore(rules.storage.data_dir)
        clock = clock or SystemClock()

        student_store = StudentStore.from_repository(
            create_student_repository(storage, rules.storage.students_key),
            id_generator=MonotonicIdGenerator(clock),
        )
        item_store = ItemStore.from_repository(
            create_item_repository(storage, rules.storage.items_key),
            id_generator=MonotonicIdGenerator(clock),
        )

        return cls(
            gradebook=GradebookService(student_store, validation_limits(rules)),
            items=ItemService(item_store),
            storage=storage,
            rules=rules,
        )
