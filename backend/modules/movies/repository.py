"""
Movie repository for document store access.

Two implementations of IMovieRepository:
- MovieRepository: Supabase `movies` table
- InMemoryMovieRepository: process-local, for development and tests

Note: repositories do NOT perform authorization checks or apply field
defaults. The service layer owns both.
"""

from typing import Any, Optional

from supabase import Client

from shared.repository import BaseRepository, InMemoryTable
from .models import DEFAULT_GENRE, DEFAULT_RATING, Movie


class MovieRepository(BaseRepository[Movie]):
    """Supabase-backed movie storage."""

    def __init__(self, db: Client, table: str = "movies") -> None:
        super().__init__(db, table)

    def list_all(self) -> list[Movie]:
        result = self._execute(
            self._query().select("*").order("created_at", desc=True),
            "list_movies",
        )
        return [self._map_to_movie(row) for row in result.data]

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        result = self._execute(
            self._query().select("*").eq("id", movie_id).limit(1),
            "get_movie",
        )
        if not result.data:
            return None
        return self._map_to_movie(result.data[0])

    def insert(self, data: dict[str, Any]) -> Movie:
        result = self._execute(self._query().insert(data), "create_movie")
        return self._map_to_movie(result.data[0])

    def update(self, movie_id: str, data: dict[str, Any]) -> Optional[Movie]:
        result = self._execute(
            self._query().update(data).eq("id", movie_id),
            "update_movie",
        )
        if not result.data:
            return None
        return self._map_to_movie(result.data[0])

    def delete(self, movie_id: str) -> bool:
        # The deleted rows come back in the response body
        result = self._execute(
            self._query().delete().eq("id", movie_id),
            "delete_movie",
        )
        return bool(result.data)

    def _map_to_movie(self, data: dict[str, Any]) -> Movie:
        """Map database row to Movie model."""
        return Movie(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description"),
            poster=data.get("poster"),
            year=data.get("year"),
            genre=data.get("genre") or DEFAULT_GENRE,
            rating=data.get("rating") or DEFAULT_RATING,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class InMemoryMovieRepository:
    """Movie storage held in process memory."""

    def __init__(self) -> None:
        self._table = InMemoryTable()

    def list_all(self) -> list[Movie]:
        # Newest insertion first, so equal timestamps keep that order
        movies = [Movie(**row) for row in reversed(self._table.all())]
        return sorted(movies, key=lambda m: m.created_at, reverse=True)

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        row = self._table.get(movie_id)
        return Movie(**row) if row else None

    def insert(self, data: dict[str, Any]) -> Movie:
        return Movie(**self._table.insert(data))

    def update(self, movie_id: str, data: dict[str, Any]) -> Optional[Movie]:
        row = self._table.update(movie_id, data)
        return Movie(**row) if row else None

    def delete(self, movie_id: str) -> bool:
        return self._table.delete(movie_id)
