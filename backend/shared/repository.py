"""
Base repository classes for document store access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and an in-memory table used when the application
runs without a database.
"""

import logging
import threading
from typing import TypeVar, Generic, Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StoreError


T = TypeVar("T")

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for Supabase-backed repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Store failures translated to StoreError via self._execute
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class MovieRepository(BaseRepository[Movie]):
            def get_by_id(self, movie_id: str) -> Optional[Movie]:
                query = self._db.table("movies").select("*").eq("id", movie_id)
                result = self._execute(query, "get_movie")
                if not result.data:
                    return None
                return self._map_to_movie(result.data[0])
    """

    def __init__(self, db: Client, table: str) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            table: Name of the table holding this repository's documents.
        """
        self._db = db
        self._table = table

    @staticmethod
    def is_unique_violation(error: StoreError) -> bool:
        """True when a StoreError was caused by a unique constraint."""
        cause = error.__cause__
        return isinstance(cause, APIError) and cause.code == UNIQUE_VIOLATION

    def _query(self):
        return self._db.table(self._table)

    def _execute(self, query: Any, operation: str) -> Any:
        """Run a query builder, translating client failures to StoreError."""
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error("Store operation %s on %s failed: %s", operation, self._table, e)
            raise StoreError(f"{operation} failed on {self._table}", operation=operation) from e


class InMemoryTable:
    """
    Thread-safe, insertion-ordered collection of documents keyed by id.

    Each call copies documents in and out, so callers never share
    mutable state with the table.
    """

    def __init__(self) -> None:
        self._rows: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def insert(
        self, row: dict[str, Any], unique: tuple[str, ...] = ()
    ) -> Optional[dict[str, Any]]:
        """
        Store a copy of row.

        Returns None instead of inserting when another row already has
        the same value for any field in unique.
        """
        with self._lock:
            for field in unique:
                if any(other.get(field) == row.get(field) for other in self._rows.values()):
                    return None
            self._rows[row["id"]] = dict(row)
            return dict(row)

    def get(self, row_id: str) -> Optional[dict[str, Any]]:
        with self._lock:
            row = self._rows.get(row_id)
            return dict(row) if row is not None else None

    def find_one(self, field: str, value: Any) -> Optional[dict[str, Any]]:
        with self._lock:
            for row in self._rows.values():
                if row.get(field) == value:
                    return dict(row)
            return None

    def all(self) -> list[dict[str, Any]]:
        """All documents, oldest insertion first."""
        with self._lock:
            return [dict(row) for row in self._rows.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def update(self, row_id: str, changes: dict[str, Any]) -> Optional[dict[str, Any]]:
        with self._lock:
            row = self._rows.get(row_id)
            if row is None:
                return None
            row.update(changes)
            return dict(row)

    def delete(self, row_id: str) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None
