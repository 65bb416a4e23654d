"""Pytest fixtures for the order backend.

Provides reusable test fixtures for:
- Database session on an in-memory SQLite database
- Test users (ADMIN, USER, blocked, Indian customer)
- Authenticated test clients with JWT tokens

Usage:
    def test_create_order(user_client, customer):
        response = user_client.post("/api/v1/orders", json={...})
        assert response.status_code == 201
"""

import sys
import os
from pathlib import Path

# Set environment variables BEFORE any imports to ensure they take effect
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper-secret-key-32-chars-long")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-256-bits-minimum-length-required-for-security")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Generator

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from models.base import Base
from models.user import User
from models.order import Order
from auth.password import hash_password
from auth.jwt import create_access_token


# One shared connection so every session sees the same in-memory database
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


# Import the actual get_db from database to use for dependency override
from database import get_db as database_get_db


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables before the test and drops them after.
    Each test gets a clean database state.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def make_user(db_session: Session, **overrides) -> User:
    """Persist a user with sensible defaults."""
    values = {
        "name": "Test User",
        "email": "user@test.com",
        "password_hash": hash_password("UserP@ss123"),
        "credit_limit": 1000.0,
        "country": "USA",
        "aadhaar_number": None,
        "blocked": False,
        "role": "USER",
    }
    values.update(overrides)
    user = User(**values)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
def user_factory(db_session: Session):
    """Persist additional users: user_factory(email="x@test.com", credit_limit=500.0)."""

    def _create(**overrides) -> User:
        return make_user(db_session, **overrides)

    return _create


@pytest.fixture(scope="function")
def admin_user(db_session: Session) -> User:
    """Create an ADMIN user for testing."""
    return make_user(
        db_session,
        name="Admin User",
        email="admin@test.com",
        password_hash=hash_password("AdminP@ss123"),
        credit_limit=100000.0,
        role="ADMIN",
    )


@pytest.fixture(scope="function")
def customer(db_session: Session) -> User:
    """Create a regular USER with a credit limit of 1000."""
    return make_user(db_session)


@pytest.fixture(scope="function")
def blocked_user(db_session: Session) -> User:
    """Create a blocked USER with a high credit limit."""
    return make_user(
        db_session,
        name="Blocked User",
        email="blocked@test.com",
        credit_limit=10000.0,
        blocked=True,
    )


@pytest.fixture(scope="function")
def order_factory(db_session: Session):
    """Persist orders directly, bypassing the service."""
    from datetime import date
    from domain.orders.status import OrderStatus, PaymentType

    def _create(user: User, **overrides) -> Order:
        values = {
            "product_name": "Laptop",
            "amount": 500.0,
            "start_date": date(2026, 1, 1),
            "end_date": date(2026, 1, 31),
            "status": OrderStatus.CREATED,
            "payment_type": PaymentType.CASH,
            "user_id": user.id,
        }
        values.update(overrides)
        order = Order(**values)
        db_session.add(order)
        db_session.commit()
        db_session.refresh(order)
        return order

    return _create


def _client_for(db_session: Session, user: User = None) -> TestClient:
    from main import app

    def override_get_db():
        try:
            yield db_session
        except Exception:
            db_session.rollback()
            raise

    app.dependency_overrides[database_get_db] = override_get_db

    client = TestClient(app)
    if user is not None:
        token = create_access_token(user_id=user.id, email=user.email, role=user.role)
        client.headers = {"Authorization": f"Bearer {token}"}
    return client


@pytest.fixture(scope="function")
def client(db_session: Session):
    """Create an unauthenticated test client.

    Useful for testing public endpoints and auth flow.
    """
    yield _client_for(db_session)

    from main import app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def user_client(db_session: Session, customer: User):
    """Create a test client authenticated as a regular USER."""
    yield _client_for(db_session, customer)

    from main import app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def admin_client(db_session: Session, admin_user: User):
    """Create a test client authenticated as ADMIN."""
    yield _client_for(db_session, admin_user)

    from main import app
    app.dependency_overrides.clear()
