#!/usr/bin/env python
"""Seed script to create the initial admin user.

Self-registration only ever creates USER accounts. Run this once during
initial setup; the admin can then create and block users through the API.

Usage:
    python backend/scripts/seed_admin.py

Environment Variables:
    DATABASE_URL: Database connection string
    PASSWORD_PEPPER: Password hashing pepper (must match the API)
    ADMIN_EMAIL: Email for admin user (default: admin@example.com)
    ADMIN_PASSWORD: Password for admin user (default: AdminP@ss123)
    ADMIN_NAME: Display name for admin user (default: System Administrator)
    ADMIN_COUNTRY: Country of the admin user (default: USA)
    ADMIN_CREDIT_LIMIT: Credit limit of the admin user (default: 100000)
"""

import os
import sys
from pathlib import Path

# Add backend/src to Python path
backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from sqlalchemy.exc import SQLAlchemyError

from auth.password import MIN_PASSWORD_LENGTH, hash_password
from auth.roles import UserRole
from database import get_db_session
from infrastructure.repositories import SqlUserRepository
from models.user import User


def main():
    """Create initial admin user."""
    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com")
    admin_password = os.getenv("ADMIN_PASSWORD", "AdminP@ss123")
    admin_name = os.getenv("ADMIN_NAME", "System Administrator")
    admin_country = os.getenv("ADMIN_COUNTRY", "USA")
    credit_limit = float(os.getenv("ADMIN_CREDIT_LIMIT", "100000"))

    if len(admin_password) < MIN_PASSWORD_LENGTH:
        print(f"ERROR: Password must be at least {MIN_PASSWORD_LENGTH} characters")
        sys.exit(1)

    try:
        with get_db_session() as session:
            users = SqlUserRepository(session)
            if users.exists_by_email(admin_email):
                print(f"ERROR: User with email {admin_email} already exists")
                sys.exit(1)

            admin_user = users.save_user(User(
                name=admin_name,
                email=admin_email,
                password_hash=hash_password(admin_password),
                credit_limit=credit_limit,
                country=admin_country,
                blocked=False,
                role=UserRole.ADMIN.value,
            ))

            print("SUCCESS: Admin user created")
            print(f"  ID:    {admin_user.id}")
            print(f"  Email: {admin_user.email}")
            print(f"  Name:  {admin_user.name}")
            print(f"  Role:  {admin_user.role}")

    except SQLAlchemyError as e:
        print(f"ERROR: Failed to create admin user: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
