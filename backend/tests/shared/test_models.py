"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_defaults_to_non_admin(self):
        user = AuthenticatedUser(id="user-123")
        assert user.id == "user-123"
        assert user.is_admin is False

    def test_admin(self):
        assert AuthenticatedUser(id="user-123", is_admin=True).is_admin is True

    def test_id_required(self):
        with pytest.raises(ValidationError):
            AuthenticatedUser()

    def test_immutable(self):
        """Route handlers cannot change who the caller is."""
        user = AuthenticatedUser(id="user-123")
        with pytest.raises(ValidationError):
            user.is_admin = True
