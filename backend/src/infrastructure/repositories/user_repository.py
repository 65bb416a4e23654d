"""User repository for database operations"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from domain.orders.ports import UserLookupPort
from models.user import User


class SqlUserRepository(UserLookupPort):
    """Repository for user table operations.

    Implements the read-only ``UserLookupPort`` consumed by business-rule
    validation, plus the writes needed by registration and user management.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def find_user_by_email(self, email: str) -> Optional[User]:
        """Look up a user by email (case-insensitive)."""
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalars().first()

    def exists_by_email(self, email: str) -> bool:
        return self.find_user_by_email(email) is not None

    def list_users(self) -> list[User]:
        stmt = select(User).order_by(User.id)
        return list(self.db.execute(stmt).scalars().all())

    def save_user(self, user: User) -> User:
        """Persist a new or modified user and flush to obtain its id."""
        self.db.add(user)
        self.db.flush()
        return user

    def delete_user(self, user: User) -> None:
        self.db.delete(user)
        self.db.flush()
