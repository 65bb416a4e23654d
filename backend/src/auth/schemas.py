"""Pydantic schemas for authentication endpoints"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for self-registration (POST /auth/register)."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password must be at least 8 characters")
    credit_limit: float = Field(..., description="Maximum amount of a single order")
    country: str = Field(..., min_length=1, max_length=100)
    aadhaar_number: Optional[str] = Field(None, pattern=r"^\d{12}$")


class LoginRequest(BaseModel):
    """Request schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    """Request schema for token refresh."""
    refresh_token: Optional[str] = None


class AuthResponse(BaseModel):
    """Response schema for register, login and refresh.

    Attributes:
        access_token: JWT access token
        refresh_token: JWT refresh token
        token_type: Token type (always "Bearer")
        expires_in: Access token expiry in seconds
        email: Authenticated user's email
    """
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int
    email: str
