"""Authentication endpoints

Provides registration, login, token refresh and current-user lookup.
These endpoints (except /me) are public.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from users.schemas import UserResponse
from .dependencies import CurrentUser
from .schemas import AuthResponse, LoginRequest, RefreshRequest, RegisterRequest
from .service import AuthService


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user and return access and refresh tokens.

    Raises:
        400: Invalid input / Aadhaar missing for Indian users
        409: Email already registered
    """
    response = AuthService(db).register(request)
    db.commit()
    return response


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Authenticate user and return tokens.

    Raises:
        401: Invalid credentials
        403: Account is blocked
    """
    return AuthService(db).login(credentials)


@router.post("/refresh", response_model=AuthResponse)
def refresh(
    body: RefreshRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Exchange a refresh token for a new access token.

    Raises:
        401: Missing, invalid or expired refresh token
    """
    return AuthService(db).refresh_token(body.refresh_token)


@router.get("/me", response_model=UserResponse)
def get_me(current_user: CurrentUser):
    """Return the currently authenticated user."""
    return UserResponse.model_validate(current_user)
