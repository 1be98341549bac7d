"""
Movies module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class MovieNotFoundError(NotFoundError):
    """Raised when a movie is not found."""

    def __init__(self, movie_id: str):
        super().__init__(
            "Movie not found",
            code="MOVIE_NOT_FOUND",
            details={"movie_id": movie_id},
        )


class MissingTitleError(ValidationError):
    """Raised when a movie is written without a title."""

    def __init__(self):
        super().__init__("Title required", code="MISSING_TITLE")
