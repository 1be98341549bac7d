"""
Base exception classes for the Cinevault backend.

Each module should define its own exceptions that inherit from these bases.
The API layer renders them with the HTTP status carried by each base class.
"""

from typing import Optional, Any


class CinevaultError(Exception):
    """
    Base exception for all Cinevault errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(CinevaultError):
    """Input validation failed."""

    status_code = 400


class ConflictError(CinevaultError):
    """A unique field is already taken."""

    status_code = 400


class AuthenticationError(CinevaultError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(CinevaultError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(CinevaultError):
    """Resource not found."""

    status_code = 404


class InternalError(CinevaultError):
    """Unexpected server-side failure. Never shown to clients in detail."""

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "INTERNAL_ERROR", details)


class StoreError(InternalError):
    """Error communicating with the backing document store."""

    def __init__(self, message: str, operation: str):
        super().__init__(message, code="STORE_ERROR")
        self.operation = operation
