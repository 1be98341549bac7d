"""
Movie catalog API endpoints.

Reads are public. Writes pass through the catalog editor gate, which
requires an admin bearer token unless write protection is disabled.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_movie_service
from api.middleware.auth import require_catalog_editor
from shared.models import AuthenticatedUser

from .interfaces import IMovieService
from .models import DeleteResponse, Movie, MovieInput

router = APIRouter()


@router.get("", response_model=list[Movie])
async def list_movies(
    service: IMovieService = Depends(get_movie_service),
) -> list[Movie]:
    """
    List all movies.

    Returns every movie, most recent first.
    """
    return await service.list_movies()


@router.get("/{movie_id}", response_model=Movie)
async def get_movie(
    movie_id: str,
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    return await service.get_movie(movie_id)


@router.post("", response_model=Movie, status_code=201)
async def create_movie(
    request: MovieInput,
    editor: Optional[AuthenticatedUser] = Depends(require_catalog_editor),
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    """
    Create a movie.

    Genre defaults to "General" and rating to 3 when not supplied.
    """
    return await service.create_movie(request)


@router.put("/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    request: MovieInput,
    editor: Optional[AuthenticatedUser] = Depends(require_catalog_editor),
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    """
    Replace a movie.

    Optional fields left out of the body are reset to their defaults.
    """
    return await service.update_movie(movie_id, request)


@router.delete("/{movie_id}", response_model=DeleteResponse)
async def delete_movie(
    movie_id: str,
    editor: Optional[AuthenticatedUser] = Depends(require_catalog_editor),
    service: IMovieService = Depends(get_movie_service),
) -> DeleteResponse:
    """
    Delete a movie.

    Unknown IDs return 404.
    """
    await service.delete_movie(movie_id)
    return DeleteResponse(id=movie_id)
