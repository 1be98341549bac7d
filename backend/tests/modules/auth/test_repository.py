"""Tests for user repositories."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone

from postgrest.exceptions import APIError

from modules.auth.exceptions import EmailAlreadyRegisteredError
from modules.auth.repository import InMemoryUserRepository, UserRepository
from shared.exceptions import StoreError


def create_mock_user_data(
    user_id: str = "user-123",
    email: str = "ada@example.com",
    is_admin: bool = False,
) -> dict:
    """Helper to create mock user row data."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "id": user_id,
        "name": "Ada",
        "email": email,
        "password_hash": "$pbkdf2-sha256$1000$c2FsdA$ZGlnZXN0",
        "is_admin": is_admin,
        "created_at": now,
        "updated_at": now,
    }


class TestUserRepository:
    @pytest.fixture
    def mock_db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, mock_db):
        return UserRepository(mock_db, "users")

    def test_get_by_email(self, repo, mock_db):
        """Should query by email and map the row."""
        query = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = [create_mock_user_data()]

        user = repo.get_by_email("ada@example.com")

        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.select.return_value.eq.assert_called_with("email", "ada@example.com")
        assert user.id == "user-123"
        assert user.email == "ada@example.com"
        assert user.password_hash.startswith("$pbkdf2-sha256$")

    def test_get_by_email_not_found(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = []
        assert repo.get_by_email("nobody@example.com") is None

    def test_get_by_id(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        query.execute.return_value.data = [create_mock_user_data(is_admin=True)]

        user = repo.get_by_id("user-123")

        mock_db.table.return_value.select.return_value.eq.assert_called_with("id", "user-123")
        assert user.is_admin is True

    def test_count(self, repo, mock_db):
        """Should use an exact count query."""
        query = mock_db.table.return_value.select.return_value.limit.return_value
        query.execute.return_value.count = 4

        assert repo.count() == 4
        mock_db.table.return_value.select.assert_called_with("id", count="exact")

    def test_count_empty_table(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.limit.return_value
        query.execute.return_value.count = None
        assert repo.count() == 0

    def test_create(self, repo, mock_db):
        row = create_mock_user_data()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [row]

        user = repo.create(row)

        mock_db.table.return_value.insert.assert_called_once_with(row)
        assert user.id == "user-123"

    def test_store_failure(self, repo, mock_db):
        """Client errors surface as StoreError."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "connection reset", "code": "08006"}
        )
        with pytest.raises(StoreError):
            repo.create(create_mock_user_data())

    def test_duplicate_email_from_unique_index(self, repo, mock_db):
        """A registration that loses the race to the unique index is a conflict."""
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "duplicate key value violates unique constraint", "code": "23505"}
        )
        with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
            repo.create(create_mock_user_data())
        assert isinstance(exc_info.value.__cause__, StoreError)


class TestInMemoryUserRepository:
    def test_create_and_lookup(self):
        repo = InMemoryUserRepository()
        created = repo.create(create_mock_user_data())

        assert repo.get_by_id("user-123") == created
        assert repo.get_by_email("ada@example.com") == created
        assert repo.get_by_email("other@example.com") is None
        assert repo.get_by_id("missing") is None

    def test_count(self):
        repo = InMemoryUserRepository()
        assert repo.count() == 0
        repo.create(create_mock_user_data(user_id="u1", email="a@example.com"))
        repo.create(create_mock_user_data(user_id="u2", email="b@example.com"))
        assert repo.count() == 2

    def test_duplicate_email_rejected(self):
        repo = InMemoryUserRepository()
        repo.create(create_mock_user_data(user_id="u1"))
        with pytest.raises(EmailAlreadyRegisteredError):
            repo.create(create_mock_user_data(user_id="u2"))
        assert repo.count() == 1
