"""SQLAlchemy Models"""

from .base import Base
from .user import User
from .order import Order

__all__ = [
    "Base",
    "User",
    "Order",
]
