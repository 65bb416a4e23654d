"""SQLAlchemy adapters for the domain persistence ports."""

from .user_repository import SqlUserRepository
from .order_repository import SqlOrderRepository

__all__ = ["SqlUserRepository", "SqlOrderRepository"]
