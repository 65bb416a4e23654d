"""Pydantic schemas for User management endpoints.

These schemas define the request/response contracts for user CRUD operations.
Responses never include password_hash.

Cross-field and database-backed rules (password confirmation, unique email,
Aadhaar for Indian users) are not expressed here; they run as explicit
boundary validators in ``users.validators``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRequest(BaseModel):
    """Request schema for creating or replacing a user (POST, PUT /users)."""
    name: str = Field(..., min_length=2, max_length=100, examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: str = Field(..., min_length=8, description="Password must be at least 8 characters")
    confirm_password: str = Field(..., min_length=1, description="Must repeat password")
    credit_limit: float = Field(..., gt=0, description="Credit limit must be positive")
    country: str = Field(..., min_length=1, max_length=100, examples=["INDIA"])
    aadhaar_number: Optional[str] = Field(
        None,
        pattern=r"^\d{12}$",
        description="Aadhaar must be 12 digits; required when country is INDIA"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "SecureP@ss123",
                "confirm_password": "SecureP@ss123",
                "credit_limit": 50000,
                "country": "INDIA",
                "aadhaar_number": "123412341234"
            }
        }
    )


class UserResponse(BaseModel):
    """Response schema for user data."""
    id: int
    name: str
    email: str
    credit_limit: float
    country: str
    aadhaar_number: Optional[str] = None
    blocked: bool
    role: str

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    """Response schema for listing users (GET /users)."""
    users: list[UserResponse]
    total: int
