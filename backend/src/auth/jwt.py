"""JWT token generation and validation

This module handles creation and validation of access and refresh tokens.

JWT Token Claims Structure:
===========================

Standard JWT Claims:
- sub (Subject): User ID as string
- iat (Issued At): Unix timestamp when token was created
- exp (Expiration): Unix timestamp when token expires

Custom Claims:
- email: User's email address
- role: "ADMIN" | "USER"
- type: "access" | "refresh" (a refresh token is never accepted as an
  access token and vice versa)

Security Properties:
- Algorithm: HS256 by default (JWT_ALGORITHM)
- Secret: JWT_SECRET setting
- Stateless validation (no database lookup required to verify signature)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from config import get_settings

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def get_access_token_expiry_seconds() -> int:
    return get_settings().ACCESS_TOKEN_EXPIRE_MINUTES * 60


def _encode(claims: Dict[str, Any], lifetime: timedelta) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        'iat': int(now.timestamp()),
        'exp': int((now + lifetime).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_access_token(user_id: int, email: str, role: str) -> str:
    """Create a signed access token for an authenticated user.

    Args:
        user_id: User's ID
        email: User's email address
        role: User's role (ADMIN, USER)

    Returns:
        str: Signed JWT token
    """
    settings = get_settings()
    return _encode(
        {'sub': str(user_id), 'email': email, 'role': role, 'type': ACCESS_TOKEN_TYPE},
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_refresh_token(user_id: int, email: str) -> str:
    """Create a signed, longer-lived refresh token."""
    settings = get_settings()
    return _encode(
        {'sub': str(user_id), 'email': email, 'type': REFRESH_TOKEN_TYPE},
        timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
    )


def decode_token(token: str, expected_type: str = ACCESS_TOKEN_TYPE) -> Dict[str, Any]:
    """Decode and validate a JWT token.

    Args:
        token: JWT token string
        expected_type: Required value of the ``type`` claim

    Returns:
        dict: Decoded token payload with claims

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid, tampered or of the wrong type
    """
    settings = get_settings()

    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise jwt.ExpiredSignatureError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise jwt.InvalidTokenError(f"Invalid token: {str(e)}")

    if payload.get('type') != expected_type:
        raise jwt.InvalidTokenError(f"Invalid token: expected {expected_type} token")
    return payload
