"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

TEST_USER_ID = "3f6c1a8e-2b47-4d0c-9a51-7e2d8c4b1f90"


def create_test_token(
    user_id: str = TEST_USER_ID,
    is_admin: bool = False,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    extra: Optional[dict] = None,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        is_admin: Admin flag to include in the token
        expired: If True, creates an expired token
        secret: Signing secret
        extra: Claims to add or override

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    iat = now - timedelta(hours=2) if expired else now

    payload = {
        "sub": user_id,
        "is_admin": is_admin,
        "exp": int(exp.timestamp()),
        "iat": int(iat.timestamp()),
    }
    payload.update(extra or {})
    return jwt.encode(payload, secret, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Settings for an isolated in-memory app; ignores any .env file."""
    values = {
        "storage_backend": "memory",
        "jwt_secret": TEST_JWT_SECRET,
        "password_hash_rounds": 1000,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings):
    """Create a fresh app (and a fresh in-memory store) for each test."""
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def admin_headers(test_user_id: str) -> dict[str, str]:
    """Authorization headers for an admin."""
    return {"Authorization": f"Bearer {create_test_token(user_id=test_user_id, is_admin=True)}"}


@pytest.fixture
def user_headers(test_user_id: str) -> dict[str, str]:
    """Authorization headers for a regular user."""
    return {"Authorization": f"Bearer {create_test_token(user_id=test_user_id)}"}
