"""
Movies module.

CRUD operations over the movie catalog.

Public API:
- IMovieService: Interface for catalog operations
- IMovieRepository: Storage contract
- Models: Movie, MovieInput
- Exceptions: MovieNotFoundError, MissingTitleError
"""

from .interfaces import IMovieService, IMovieRepository
from .models import (
    Movie,
    MovieInput,
    DeleteResponse,
    DEFAULT_GENRE,
    DEFAULT_RATING,
)
from .exceptions import MovieNotFoundError, MissingTitleError

__all__ = [
    "IMovieService",
    "IMovieRepository",
    "Movie",
    "MovieInput",
    "DeleteResponse",
    "DEFAULT_GENRE",
    "DEFAULT_RATING",
    "MovieNotFoundError",
    "MissingTitleError",
]
