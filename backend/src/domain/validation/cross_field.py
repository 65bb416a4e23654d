"""Generic two-field consistency check.

A CrossFieldValidator compares two values read off the same object through
accessor functions. It is used at the API boundary, for example to make
sure ``confirm_password`` repeats ``password``.

Rules:
- If either value is None the check passes; presence is the job of the
  required-field validation.
- Otherwise the values must be equal.
- A failure is reported as a single violation against the *secondary*
  field, never as an object-level error.

Usage:
    password_match = CrossFieldValidator(
        "password",
        "confirm_password",
        primary=lambda r: r.password,
        secondary=lambda r: r.confirm_password,
        message="Passwords do not match",
    )
    password_match.check(request)  # raises ValidationError(field="confirm_password")
"""

import logging
from typing import Any, Optional

from domain.errors import ValidationError
from .models import Accessor, FieldViolation


logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Cross field validation failed"


class CrossFieldValidator:
    """Equality check between a primary and a secondary field."""

    def __init__(
        self,
        primary_field: str,
        secondary_field: str,
        primary: Accessor,
        secondary: Accessor,
        message: str = DEFAULT_MESSAGE,
    ):
        self.primary_field = primary_field
        self.secondary_field = secondary_field
        self._primary = primary
        self._secondary = secondary
        self.message = message

    def is_valid(self, obj: Any) -> bool:
        if obj is None:
            return True

        primary_value = self._primary(obj)
        secondary_value = self._secondary(obj)
        if primary_value is None or secondary_value is None:
            return True

        return primary_value == secondary_value

    def validate(self, obj: Any) -> Optional[FieldViolation]:
        """Return the violation for ``obj``, or None if it passes."""
        if self.is_valid(obj):
            return None

        logger.debug(
            f"Cross-field validation failed: {self.primary_field} does not match "
            f"{self.secondary_field}"
        )
        return FieldViolation(field=self.secondary_field, message=self.message)

    def check(self, obj: Any) -> None:
        """Raise ValidationError keyed to the secondary field on mismatch."""
        violation = self.validate(obj)
        if violation:
            raise ValidationError(violation.message, field=violation.field)

    __call__ = check


password_match = CrossFieldValidator(
    "password",
    "confirm_password",
    primary=lambda request: request.password,
    secondary=lambda request: request.confirm_password,
    message="Passwords do not match",
)
