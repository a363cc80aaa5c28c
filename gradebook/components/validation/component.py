"""
Validation component - Form validation and form/entity conversion.

Shell Layer - the presentation layer calls these around the store:
validate, show errors, clear a field's error when it changes, and on
success hand the parsed fields to the store.
"""

from __future__ import annotations

from collections.abc import Mapping

from gradebook.domain.entities import Item, ItemFields, Student, StudentFields

from ._impl import parse_score, validate_item_value, validate_student_fields
from .models import (
    DEFAULT_LIMITS,
    ItemFormInput,
    StudentFormInput,
    ValidationLimits,
    ValidationOutput,
)

# --- Validation Entry Points ---


def run_validate(
    inp: StudentFormInput,
    limits: ValidationLimits | None = None,
) -> ValidationOutput:
    """Validate a student form."""
    errors = validate_student_fields(
        name=inp.name,
        subject=inp.subject,
        score=inp.score,
        limits=limits or DEFAULT_LIMITS,
    )
    return ValidationOutput(errors=tuple(errors), success=not errors)


def run_validate_item(inp: ItemFormInput) -> ValidationOutput:
    """Validate an item form."""
    errors = validate_item_value(inp.value)
    return ValidationOutput(errors=tuple(errors), success=not errors)


def validate(
    inp: StudentFormInput,
    limits: ValidationLimits | None = None,
) -> dict[str, str]:
    """Return field -> message for every invalid field; empty means valid."""
    return run_validate(inp, limits).messages


def validate_item(inp: ItemFormInput) -> dict[str, str]:
    return run_validate_item(inp).messages


def clear_field_error(errors: Mapping[str, str], field: str) -> dict[str, str]:
    """Drop one field's error, leaving the others untouched."""
    return {name: message for name, message in errors.items() if name != field}


# --- Form Conversion ---


def parse_student_form(inp: StudentFormInput) -> StudentFields:
    """
    Convert a validated form into store fields.

    Raises:
        ValueError: if the score does not parse; validate first.
    """
    score = parse_score(inp.score)
    if score is None:
        raise ValueError(f"Score {inp.score!r} is not a number")
    return StudentFields(name=inp.name.strip(), subject=inp.subject.strip(), score=score)


def parse_item_form(inp: ItemFormInput) -> ItemFields:
    return ItemFields(value=inp.value.strip())


def form_from_student(student: Student | None) -> StudentFormInput:
    """Pre-fill the form from the entity under edit, or blank it."""
    if student is None:
        return StudentFormInput()
    return StudentFormInput(
        name=student.name,
        subject=student.subject,
        score=format(student.score, "g"),
    )


def form_from_item(item: Item | None) -> ItemFormInput:
    if item is None:
        return ItemFormInput()
    return ItemFormInput(value=item.value)
