"""
Field rules for the student and item forms.

Functional Core - pure business logic. Each field reports at most one
error: the first rule it fails.
"""

from __future__ import annotations

import math

from .models import DEFAULT_LIMITS, FieldError, ValidationLimits


def parse_score(text: str) -> float | None:
    """Parse score text; None when empty or not a finite number."""
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def validate_name(name: str, limits: ValidationLimits = DEFAULT_LIMITS) -> FieldError | None:
    stripped = name.strip()
    if not stripped:
        return FieldError(field="name", code="name_required", message="Name is required")
    if len(stripped) < limits.name_min_length:
        return FieldError(
            field="name",
            code="name_too_short",
            message=f"Name must be at least {limits.name_min_length} characters",
        )
    return None


def validate_subject(subject: str) -> FieldError | None:
    if not subject.strip():
        return FieldError(
            field="subject", code="subject_required", message="Subject is required"
        )
    return None


def validate_score(score: str, limits: ValidationLimits = DEFAULT_LIMITS) -> FieldError | None:
    if not score.strip():
        return FieldError(field="score", code="score_required", message="Score is required")

    value = parse_score(score)
    if value is None:
        return FieldError(
            field="score", code="score_not_a_number", message="Score must be a number"
        )

    if value < limits.score_min or value > limits.score_max:
        return FieldError(
            field="score",
            code="score_out_of_range",
            message=(
                f"Score must be between {limits.score_min:.1f} "
                f"and {limits.score_max:.1f}"
            ),
        )
    return None


def validate_student_fields(
    name: str,
    subject: str,
    score: str,
    limits: ValidationLimits = DEFAULT_LIMITS,
) -> list[FieldError]:
    """Validate every student field, in form order."""
    checks = (
        validate_name(name, limits),
        validate_subject(subject),
        validate_score(score, limits),
    )
    return [error for error in checks if error is not None]


def validate_item_value(value: str) -> list[FieldError]:
    if not value.strip():
        return [FieldError(field="value", code="value_required", message="Value is required")]
    return []
