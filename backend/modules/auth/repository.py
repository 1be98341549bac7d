"""
User repository for document store access.

Two implementations of IUserRepository:
- UserRepository: Supabase `users` table
- InMemoryUserRepository: process-local, for development and tests
"""

from typing import Any, Optional

from supabase import Client

from shared.exceptions import StoreError
from shared.repository import BaseRepository, InMemoryTable
from .exceptions import EmailAlreadyRegisteredError
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Supabase-backed user storage.

    Email uniqueness is also enforced by a unique index on the table, so
    a registration that loses a race still gets EmailAlreadyRegisteredError.
    """

    def __init__(self, db: Client, table: str = "users") -> None:
        super().__init__(db, table)

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._execute(
            self._query().select("*").eq("id", user_id).limit(1),
            "get_user",
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._execute(
            self._query().select("*").eq("email", email).limit(1),
            "get_user_by_email",
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def count(self) -> int:
        result = self._execute(
            self._query().select("id", count="exact").limit(1),
            "count_users",
        )
        return result.count or 0

    def create(self, data: dict[str, Any]) -> UserRecord:
        try:
            result = self._execute(self._query().insert(data), "create_user")
        except StoreError as e:
            if self.is_unique_violation(e):
                raise EmailAlreadyRegisteredError(data["email"]) from e
            raise
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            is_admin=bool(data.get("is_admin", False)),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class InMemoryUserRepository:
    """User storage held in process memory."""

    def __init__(self) -> None:
        self._table = InMemoryTable()

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        row = self._table.get(user_id)
        return UserRecord(**row) if row else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        row = self._table.find_one("email", email)
        return UserRecord(**row) if row else None

    def count(self) -> int:
        return self._table.count()

    def create(self, data: dict[str, Any]) -> UserRecord:
        row = self._table.insert(data, unique=("email",))
        if row is None:
            raise EmailAlreadyRegisteredError(data["email"])
        return UserRecord(**row)
