"""Book Validation: pure shape checks for create and update payloads.

Invariants:
    - validate_create / validate_update are PURE: no IO, no mutation, no exceptions
      for expected failures
    - A failed result always carries at least one violation
    - Violations are ordered by field path, then by message
    - validate_update rejects an isbn key before any shape rule is evaluated

Design Decisions:
    - ValidationResult over raising: the route decides how to surface failure
    - Draft 7 validator: bool is not an integer, so True never passes as pages/year
"""

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as ShapeViolation

from bookshelf.core.book_shapes import NEW_BOOK_SHAPE, UPDATE_BOOK_SHAPE


ISBN_IMMUTABLE_MESSAGE: str = "Not allowed to change isbn"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one payload against one shape."""
    valid: bool
    violations: list[str] = field(default_factory=list)


def validate_create(
    payload: Any, shape: dict = NEW_BOOK_SHAPE,
) -> ValidationResult:
    """Check a new-book payload. Every Book attribute is required."""
    return _check_shape(payload, shape)


def validate_update(
    payload: Any, shape: dict = UPDATE_BOOK_SHAPE,
) -> ValidationResult:
    """Check an update payload. Any isbn key fails outright."""
    if isinstance(payload, dict) and "isbn" in payload:
        return ValidationResult(valid=False, violations=[ISBN_IMMUTABLE_MESSAGE])
    return _check_shape(payload, shape)


def _check_shape(payload: Any, shape: dict) -> ValidationResult:
    errors = sorted(
        Draft7Validator(shape).iter_errors(payload),
        key=lambda e: ([str(p) for p in e.absolute_path], e.message),
    )
    if not errors:
        return ValidationResult(valid=True)
    return ValidationResult(
        valid=False, violations=[_describe(e) for e in errors],
    )


def _describe(error: ShapeViolation) -> str:
    """Render a violation as 'instance.<field>: <message>'."""
    path = ".".join(str(p) for p in error.absolute_path)
    prefix = f"instance.{path}" if path else "instance"
    return f"{prefix}: {error.message}"
