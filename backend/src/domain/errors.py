"""Error taxonomy for the order domain.

Every failure raised by validators, the order state machine and the user /
auth services is one of the kinds below. The kinds are transport-agnostic;
the HTTP mapping lives in ``api.errors``.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Classification of a domain failure."""
    VALIDATION = "VALIDATION"          # malformed / conditionally-invalid input
    NOT_FOUND = "NOT_FOUND"            # referenced entity absent
    FORBIDDEN = "FORBIDDEN"            # actor disallowed (e.g. blocked user)
    CONFLICT = "CONFLICT"              # disallowed given current entity state
    BUSINESS_RULE = "BUSINESS_RULE"    # credit limit, illegal status transition
    UNAUTHORIZED = "UNAUTHORIZED"      # bad credentials or token


class OrderAppError(Exception):
    """Base class for all classified domain errors.

    Attributes:
        kind: Error classification
        message: Human-readable message, safe to return to clients
        field: Name of the offending input field, if any
        details: Extra structured context
    """
    kind: ErrorKind

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, field={self.field!r})"


class ValidationError(OrderAppError):
    kind = ErrorKind.VALIDATION


class NotFoundError(OrderAppError):
    kind = ErrorKind.NOT_FOUND


class ForbiddenError(OrderAppError):
    kind = ErrorKind.FORBIDDEN


class ConflictError(OrderAppError):
    kind = ErrorKind.CONFLICT


class BusinessRuleError(OrderAppError):
    kind = ErrorKind.BUSINESS_RULE


class AuthenticationError(OrderAppError):
    kind = ErrorKind.UNAUTHORIZED
