import pytest

from gradebook.adapters.memory_storage import InMemoryKeyValueStore
from gradebook.components.persistence import JsonCollectionRepository, create_student_repository
from gradebook.components.store import MonotonicIdGenerator, StudentStore
from gradebook.domain.entities import Student
from gradebook.services.gradebook import GradebookService
from tests.fakes import FixedClock


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def student_repo(storage: InMemoryKeyValueStore) -> JsonCollectionRepository[Student]:
    return create_student_repository(storage)


@pytest.fixture
def student_store(
    student_repo: JsonCollectionRepository[Student], clock: FixedClock
) -> StudentStore:
    """Student store loaded from the (empty) in-memory slot."""
    return StudentStore.from_repository(student_repo, id_generator=MonotonicIdGenerator(clock))


@pytest.fixture
def service(student_store: StudentStore) -> GradebookService:
    return GradebookService(student_store)
