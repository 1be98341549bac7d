"""
Movies module data models.

These models define the catalog entries and the payloads used to write them.
"""

import math
from datetime import datetime
from typing import Optional, Any
from pydantic import BaseModel, Field


DEFAULT_GENRE = "General"
DEFAULT_RATING = 3
MIN_RATING = 1
MAX_RATING = 5


def normalize_rating(value: Any) -> int:
    """
    Coerce a client-supplied rating into [MIN_RATING, MAX_RATING].

    Absent, boolean or non-numeric values fall back to DEFAULT_RATING.
    Numbers are rounded half up, then clamped.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_RATING
    # JSON integers are unbounded; clamp them before any float conversion
    if isinstance(value, int):
        return max(MIN_RATING, min(MAX_RATING, value))
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_RATING
    if not math.isfinite(number):
        return DEFAULT_RATING
    return max(MIN_RATING, min(MAX_RATING, math.floor(number + 0.5)))


def normalize_genre(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return DEFAULT_GENRE
    return value.strip()


class MovieInput(BaseModel):
    """
    Payload for creating or replacing a movie.

    Title is optional at the schema level; the service rejects a missing
    or blank title with a 400 of its own.
    """

    title: Optional[str] = Field(None, max_length=500, description="Movie title")
    description: Optional[str] = Field(None, description="Synopsis")
    poster: Optional[str] = Field(None, description="Poster image URL")
    year: Optional[int] = Field(None, description="Release year")
    genre: Optional[str] = Field(None, description=f"Genre (default '{DEFAULT_GENRE}')")
    rating: Any = Field(
        None,
        description=f"Rating {MIN_RATING}-{MAX_RATING} (default {DEFAULT_RATING})",
    )


class Movie(BaseModel):
    """A catalog entry."""

    id: str = Field(..., description="Movie UUID")
    title: str
    description: Optional[str] = None
    poster: Optional[str] = None
    year: Optional[int] = None
    genre: str = DEFAULT_GENRE
    rating: int = Field(default=DEFAULT_RATING, ge=MIN_RATING, le=MAX_RATING)
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    """Acknowledgement for a deleted movie."""

    message: str = "Movie deleted"
    id: str
