"""
Movies module interface.

The API layer depends on IMovieService for all catalog operations.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import Movie, MovieInput


@runtime_checkable
class IMovieRepository(Protocol):
    """Persistence contract for movie documents."""

    def list_all(self) -> list[Movie]:
        """All movies, newest first."""
        ...

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        ...

    def insert(self, data: dict[str, Any]) -> Movie:
        ...

    def update(self, movie_id: str, data: dict[str, Any]) -> Optional[Movie]:
        """Apply changes; None if the movie does not exist."""
        ...

    def delete(self, movie_id: str) -> bool:
        """True if a movie was removed."""
        ...


@runtime_checkable
class IMovieService(Protocol):
    """
    Interface for catalog operations.

    This protocol defines the contract that the movies module exposes
    to the API layer.
    """

    async def list_movies(self) -> list[Movie]:
        """
        List every movie, most recently created first.

        No pagination: the whole catalog is returned.
        """
        ...

    async def get_movie(self, movie_id: str) -> Movie:
        """
        Get a movie by ID.

        Raises:
            MovieNotFoundError: If no movie has this ID
        """
        ...

    async def create_movie(self, fields: MovieInput) -> Movie:
        """
        Create a movie with defaults applied.

        Args:
            fields: Client-supplied movie fields

        Returns:
            The stored movie, with its new ID and timestamps

        Raises:
            MissingTitleError: If the title is absent or blank
        """
        ...

    async def update_movie(self, movie_id: str, fields: MovieInput) -> Movie:
        """
        Replace a movie's fields.

        Optional fields missing from the payload are reset to their
        defaults rather than kept.

        Raises:
            MissingTitleError: If the title is absent or blank
            MovieNotFoundError: If no movie has this ID
        """
        ...

    async def delete_movie(self, movie_id: str) -> None:
        """
        Delete a movie.

        Raises:
            MovieNotFoundError: If no movie has this ID
        """
        ...
