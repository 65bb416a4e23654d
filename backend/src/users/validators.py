"""Boundary validators for user requests.

Each request type owns an ordered list of validators; ``run_validators``
stops at the first failure. Order for UserRequest:

1. confirm_password repeats password (400, reported on ``confirm_password``)
2. Aadhaar number present for Indian users (400)
3. Email not used by another user (409)
"""

from typing import Any, Optional

from domain.errors import ConflictError, ValidationError
from domain.validation import password_match
from domain.validation.boundary import BoundaryValidator
from infrastructure.repositories import SqlUserRepository

AADHAAR_COUNTRY = "INDIA"


def require_aadhaar_for_india(request: Any) -> None:
    if (request.country or "").strip().upper() == AADHAAR_COUNTRY and not request.aadhaar_number:
        raise ValidationError("Aadhaar number required for Indian users", field="aadhaar_number")


def unique_email(
    users: SqlUserRepository,
    user_id: Optional[int] = None,
    message: str = "Email already exists",
) -> BoundaryValidator:
    """Build a validator rejecting emails owned by a user other than ``user_id``."""

    def validator(request: Any) -> None:
        if not request.email:
            return
        existing = users.find_user_by_email(request.email)
        if existing is not None and existing.id != user_id:
            raise ConflictError(message, field="email")

    return validator


def user_request_validators(
    users: SqlUserRepository,
    user_id: Optional[int] = None,
) -> list[BoundaryValidator]:
    return [
        password_match,
        require_aadhaar_for_india,
        unique_email(users, user_id),
    ]


def register_request_validators(users: SqlUserRepository) -> list[BoundaryValidator]:
    return [
        unique_email(users, message="Email already registered"),
        require_aadhaar_for_india,
    ]
