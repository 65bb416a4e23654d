"""User management endpoints.

- Create, list, block and delete require the ADMIN role
- Get and update require an authenticated user

Email uniqueness is enforced across all users.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from auth.dependencies import get_current_user, require_role
from auth.roles import UserRole
from database import get_db
from models.user import User
from .schemas import UserListResponse, UserRequest, UserResponse
from .service import UserService


router = APIRouter(prefix="/users", tags=["User Management"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user (ADMIN only)",
)
def create_user(
    data: UserRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.ADMIN))
) -> UserResponse:
    """Create a new user.

    Raises:
        400: Passwords do not match / Aadhaar missing for Indian users
        409: Email already exists
    """
    user = UserService(db).create_user(data)
    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users (ADMIN only)",
)
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.ADMIN))
) -> UserListResponse:
    users = UserService(db).list_users()
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        total=len(users)
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> UserResponse:
    return UserResponse.model_validate(UserService(db).get_user(user_id))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
)
def update_user(
    user_id: int,
    data: UserRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> UserResponse:
    """Replace a user's profile.

    Raises:
        404: User not found
        400: Passwords do not match / Aadhaar missing for Indian users
        409: Email already used by another user
    """
    user = UserService(db).update_user(user_id, data)
    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)


@router.post(
    "/{user_id}/block",
    response_model=UserResponse,
    summary="Block user (ADMIN only)",
    description="Blocked users can no longer log in or place orders.",
)
def block_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.ADMIN))
) -> UserResponse:
    user = UserService(db).block_user(user_id)
    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user (ADMIN only)",
)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.ADMIN))
) -> Response:
    UserService(db).delete_user(user_id)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
