"""Authentication service - registration, login and token refresh."""

import logging
from typing import Optional

import jwt
from sqlalchemy.orm import Session

from domain.errors import AuthenticationError, ForbiddenError
from infrastructure.repositories import SqlUserRepository
from models.user import User
from observability.metrics import auth_events_total
from users.service import UserService
from .jwt import (
    REFRESH_TOKEN_TYPE,
    create_access_token,
    create_refresh_token,
    decode_token,
    get_access_token_expiry_seconds,
)
from .password import verify_password
from .schemas import AuthResponse, LoginRequest, RegisterRequest


logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication flows."""

    def __init__(self, db: Session):
        self.db = db
        self.users = SqlUserRepository(db)

    def register(self, request: RegisterRequest) -> AuthResponse:
        """Register a new USER account and issue tokens.

        Raises:
            ConflictError: Email already registered
            ValidationError: Indian user without Aadhaar number
        """
        user = UserService(self.db).register(request)
        auth_events_total.labels(event="register").inc()
        return self._build_auth_response(user)

    def login(self, request: LoginRequest) -> AuthResponse:
        """Authenticate with email and password.

        The same message is returned for unknown email and wrong password.

        Raises:
            AuthenticationError: Invalid credentials
            ForbiddenError: Account is blocked
        """
        user = self.users.find_user_by_email(request.email)
        if user is None or not verify_password(request.password, user.password_hash):
            auth_events_total.labels(event="login_failed").inc()
            logger.warning("Login failed: invalid credentials")
            raise AuthenticationError("Invalid credentials")

        if user.blocked:
            auth_events_total.labels(event="login_failed").inc()
            logger.warning(f"Login refused for blocked user {user.id}", extra={"user_id": user.id})
            raise ForbiddenError("User account is blocked")

        auth_events_total.labels(event="login_success").inc()
        logger.info(f"User {user.id} logged in", extra={"user_id": user.id})
        return self._build_auth_response(user)

    def refresh_token(self, refresh_token: Optional[str]) -> AuthResponse:
        """Issue a new access token for a valid refresh token.

        Raises:
            AuthenticationError: Missing, invalid or expired refresh token,
                or the user no longer exists / is blocked
        """
        if not refresh_token or not refresh_token.strip():
            raise AuthenticationError("Invalid refresh token")

        try:
            payload = decode_token(refresh_token, expected_type=REFRESH_TOKEN_TYPE)
            user_id = int(payload["sub"])
        except (jwt.InvalidTokenError, KeyError, ValueError):
            raise AuthenticationError("Invalid refresh token")

        user = self.users.find_user_by_id(user_id)
        if user is None or user.blocked:
            raise AuthenticationError("Invalid refresh token")

        auth_events_total.labels(event="refresh").inc()
        return AuthResponse(
            access_token=create_access_token(user.id, user.email, user.role),
            refresh_token=refresh_token,
            token_type="Bearer",
            expires_in=get_access_token_expiry_seconds(),
            email=user.email,
        )

    @staticmethod
    def _build_auth_response(user: User) -> AuthResponse:
        return AuthResponse(
            access_token=create_access_token(user.id, user.email, user.role),
            refresh_token=create_refresh_token(user.id, user.email),
            token_type="Bearer",
            expires_in=get_access_token_expiry_seconds(),
            email=user.email,
        )
