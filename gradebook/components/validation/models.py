"""
Validation component - Form input and error models.
"""

from __future__ import annotations

from dataclasses import dataclass

from gradebook.components.classifier import SCORE_MAX, SCORE_MIN

# --- Form Inputs ---


@dataclass(frozen=True)
class StudentFormInput:
    """Raw student form values, exactly as typed."""

    name: str = ""
    subject: str = ""
    score: str = ""


@dataclass(frozen=True)
class ItemFormInput:
    """Raw item form value."""

    value: str = ""


# --- Validation Errors ---


@dataclass(frozen=True)
class FieldError:
    """Validation error attached to a single form field."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationOutput:
    """Output from validating a form."""

    errors: tuple[FieldError, ...]
    success: bool

    @property
    def messages(self) -> dict[str, str]:
        """Field name to message; empty when the form is valid."""
        return {error.field: error.message for error in self.errors}


# --- Limits ---


@dataclass(frozen=True)
class ValidationLimits:
    """Tunable bounds, normally taken from the rules file."""

    name_min_length: int = 2
    score_min: float = SCORE_MIN
    score_max: float = SCORE_MAX


DEFAULT_LIMITS = ValidationLimits()
