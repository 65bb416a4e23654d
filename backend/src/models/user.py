"""User SQLAlchemy model"""

import re

from sqlalchemy import Boolean, CheckConstraint, Column, Float, Integer, String, Text
from sqlalchemy.orm import relationship, validates

from .base import Base


class User(Base):
    """User model representing account holders who place orders.

    Passwords are hashed using Argon2id. ``credit_limit`` caps the amount of
    any single order; ``blocked`` users cannot log in or place orders.
    """
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    credit_limit = Column(Float, nullable=False)
    country = Column(String(100), nullable=False)
    aadhaar_number = Column(String(12), nullable=True)
    blocked = Column(Boolean, nullable=False, default=False)
    role = Column(String(20), nullable=False, default="USER")

    # Relationships
    orders = relationship("Order", back_populates="user", cascade="all, delete-orphan")

    # Constraints
    __table_args__ = (
        CheckConstraint("role IN ('ADMIN', 'USER')", name="ck_user_role"),
    )

    @validates("email")
    def validate_email(self, key, value):
        """Basic email format validation"""
        if not re.match(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$', value):
            raise ValueError("Invalid email format")
        return value.lower()

