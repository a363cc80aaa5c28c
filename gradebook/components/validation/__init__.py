"""
Validation component - Student and item form validation.
"""

from ._impl import parse_score, validate_student_fields
from .component import (
    clear_field_error,
    form_from_item,
    form_from_student,
    parse_item_form,
    parse_student_form,
    run_validate,
    run_validate_item,
    validate,
    validate_item,
)
from .models import (
    DEFAULT_LIMITS,
    FieldError,
    ItemFormInput,
    StudentFormInput,
    ValidationLimits,
    ValidationOutput,
)

__all__ = [
    # Entry points
    "run_validate",
    "run_validate_item",
    "validate",
    "validate_item",
    # Form helpers
    "clear_field_error",
    "parse_student_form",
    "parse_item_form",
    "form_from_student",
    "form_from_item",
    "parse_score",
    "validate_student_fields",
    # Models
    "StudentFormInput",
    "ItemFormInput",
    "FieldError",
    "ValidationOutput",
    "ValidationLimits",
    "DEFAULT_LIMITS",
]
