"""
GradebookService - the surface the presentation layer talks to.

Wraps the student store with validation, delete confirmation and
statistics. The presentation layer re-renders from get_collection(),
get_edit_selection() and aggregate() after every call.
"""

from __future__ import annotations

import logging

from gradebook.components.statistics import CollectionStatistics, aggregate
from gradebook.components.store import ConfirmPort, StudentStore
from gradebook.components.validation import (
    StudentFormInput,
    ValidationLimits,
    form_from_student,
    parse_student_form,
    validate,
)
from gradebook.domain.entities import Student, StudentFields

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this student?"


class GradebookService:
    def __init__(self, store: StudentStore, limits: ValidationLimits | None = None) -> None:
        self.store = store
        self.limits = limits

    # --- Reads ---

    def get_collection(self) -> tuple[Student, ...]:
        return self.store.collection

    def get_edit_selection(self) -> Student | None:
        return self.store.edit_selection

    def get_student(self, student_id: int) -> Student | None:
        return self.store.get(student_id)

    def edit_form(self) -> StudentFormInput:
        """Form contents for the current selection, blank when adding."""
        return form_from_student(self.store.edit_selection)

    # --- Lifecycle ---

    def validate(self, form: StudentFormInput) -> dict[str, str]:
        return validate(form, self.limits)

    def add_or_update(self, fields: StudentFields) -> Student:
        return self.store.add_or_update(fields)

    def submit(self, form: StudentFormInput) -> tuple[Student | None, dict[str, str]]:
        """
        Validate the form and, if valid, add or update.

        Returns:
            Tuple of (student, errors). Student is None if validation fails.
        """
        errors = self.validate(form)
        if errors:
            return None, errors
        return self.add_or_update(parse_student_form(form)), {}

    def delete(self, student_id: int, confirm: ConfirmPort | None = None) -> bool:
        """
        Delete a student, asking ``confirm`` first when given.

        Returns False if the user declined or the id is unknown.
        """
        if confirm is not None and not confirm.confirm(DELETE_PROMPT):
            logger.info("Deletion of student %s cancelled", student_id)
            return False
        return self.store.delete(student_id)

    def select_for_edit(self, student: Student) -> bool:
        return self.store.select_for_edit(student)

    def cancel_edit(self) -> None:
        self.store.cancel_edit()

    # --- Derived data ---

    def aggregate(self) -> CollectionStatistics | None:
        return aggregate(self.store.collection)
