"""
Movie catalog service implementation.

Applies field defaults and validation, then hands documents to the
repository. Repository calls are blocking, so they run in worker threads.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

import anyio

from .interfaces import IMovieService, IMovieRepository
from .models import Movie, MovieInput, normalize_genre, normalize_rating
from .exceptions import MissingTitleError, MovieNotFoundError

logger = logging.getLogger(__name__)


def _is_movie_id(movie_id: str) -> bool:
    try:
        uuid.UUID(movie_id)
    except ValueError:
        return False
    return True


class MovieService(IMovieService):
    """
    Catalog service over an IMovieRepository.

    Implements IMovieService. Deletes are strict: removing an unknown
    movie raises MovieNotFoundError.
    """

    def __init__(self, repository: IMovieRepository):
        self._repository = repository

    async def list_movies(self) -> list[Movie]:
        return await anyio.to_thread.run_sync(self._repository.list_all)

    async def get_movie(self, movie_id: str) -> Movie:
        if not _is_movie_id(movie_id):
            raise MovieNotFoundError(movie_id)
        movie = await anyio.to_thread.run_sync(self._repository.get_by_id, movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    async def create_movie(self, fields: MovieInput) -> Movie:
        """Create a movie in the store."""
        data = self._to_document(fields)
        now = datetime.now(timezone.utc).isoformat()
        data.update(id=str(uuid.uuid4()), created_at=now, updated_at=now)

        movie = await anyio.to_thread.run_sync(self._repository.insert, data)
        logger.info("Created movie %s (%r)", movie.id, movie.title)
        return movie

    async def update_movie(self, movie_id: str, fields: MovieInput) -> Movie:
        """Replace every editable field; created_at is kept."""
        data = self._to_document(fields)
        if not _is_movie_id(movie_id):
            raise MovieNotFoundError(movie_id)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        movie = await anyio.to_thread.run_sync(self._repository.update, movie_id, data)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        logger.info("Updated movie %s", movie_id)
        return movie

    async def delete_movie(self, movie_id: str) -> None:
        if not _is_movie_id(movie_id):
            raise MovieNotFoundError(movie_id)
        deleted = await anyio.to_thread.run_sync(self._repository.delete, movie_id)
        if not deleted:
            raise MovieNotFoundError(movie_id)
        logger.info("Deleted movie %s", movie_id)

    def _to_document(self, fields: MovieInput) -> dict[str, Any]:
        """Validate the title and apply defaults to the optional fields."""
        title = (fields.title or "").strip()
        if not title:
            raise MissingTitleError()

        return {
            "title": title,
            "description": fields.description,
            "poster": fields.poster,
            "year": fields.year,
            "genre": normalize_genre(fields.genre),
            "rating": normalize_rating(fields.rating),
        }
