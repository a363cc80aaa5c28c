from pydantic import BaseModel, ConfigDict, computed_field

from gradebook.components.classifier import Category, classify

# --- Students ---


class StudentFields(BaseModel):
    """The user-editable part of a student record."""

    model_config = ConfigDict(frozen=True)

    name: str
    subject: str
    score: float


class Student(StudentFields):
    id: int

    # Derived from score on every construction; any persisted value is ignored.
    @computed_field  # type: ignore[prop-decorator]
    @property
    def category(self) -> Category:
        return classify(self.score)


# --- Generic items ---


class ItemFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str


class Item(ItemFields):
    id: int
