"""User service - account management used by the users and auth routers."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from auth.password import hash_password
from auth.roles import UserRole
from domain.errors import NotFoundError
from domain.validation import run_validators
from infrastructure.repositories import SqlUserRepository
from models.user import User
from .validators import register_request_validators, user_request_validators


logger = logging.getLogger(__name__)


class UserService:
    """Service for user operations."""

    def __init__(self, db: Session):
        self.db = db
        self.users = SqlUserRepository(db)

    def register(self, request: Any) -> User:
        """Self-registration: validate, hash the password, persist as USER.

        Raises:
            ConflictError: Email already registered
            ValidationError: Indian user without Aadhaar number
        """
        run_validators(request, register_request_validators(self.users))
        user = self.users.save_user(self._build_user(request))
        logger.info(f"User {user.id} registered", extra={"user_id": user.id})
        return user

    def create_user(self, request: Any) -> User:
        """Admin-created user.

        Raises:
            ValidationError: Passwords do not match / Aadhaar missing
            ConflictError: Email already exists
        """
        run_validators(request, user_request_validators(self.users))
        user = self.users.save_user(self._build_user(request))
        logger.info(f"User {user.id} created", extra={"user_id": user.id})
        return user

    def get_user(self, user_id: int) -> User:
        user = self.users.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def list_users(self) -> list[User]:
        return self.users.list_users()

    def update_user(self, user_id: int, request: Any) -> User:
        """Replace a user's profile, including the password (always rehashed)."""
        user = self.get_user(user_id)
        run_validators(request, user_request_validators(self.users, user_id=user_id))

        user.name = request.name
        user.email = request.email
        user.credit_limit = request.credit_limit
        user.country = request.country
        user.aadhaar_number = request.aadhaar_number
        user.password_hash = hash_password(request.password)

        user = self.users.save_user(user)
        logger.info(f"User {user.id} updated", extra={"user_id": user.id})
        return user

    def block_user(self, user_id: int) -> User:
        user = self.get_user(user_id)
        user.blocked = True
        user = self.users.save_user(user)
        logger.info(f"User {user.id} blocked", extra={"user_id": user.id})
        return user

    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        self.users.delete_user(user)
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})

    @staticmethod
    def _build_user(request: Any) -> User:
        return User(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password),
            credit_limit=request.credit_limit,
            country=request.country,
            aadhaar_number=request.aadhaar_number,
            blocked=False,
            role=UserRole.USER.value,
        )
