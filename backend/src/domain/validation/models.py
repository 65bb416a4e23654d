"""Validation result models."""

from dataclasses import dataclass, field
from typing import Any, Callable


# Reads one field off the object under validation
Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class FieldViolation:
    """A single constraint violation reported against one input field.

    This is the domain model returned by boundary validators. It is turned
    into a ``ValidationError`` (and, at the API edge, into the
    ``validation_errors`` map of the error body).
    """
    field: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, str]:
        return {self.field: self.message}
