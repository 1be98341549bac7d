"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
The service depends on IUserRepository so that any document store can back it.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, PublicUser, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence contract for user records."""

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def count(self) -> int:
        ...

    def create(self, data: dict[str, Any]) -> UserRecord:
        """Persist a new user; a taken email raises EmailAlreadyRegisteredError."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResponse:
        """
        Create a user and issue a token.

        The first user ever registered becomes an admin.

        Raises:
            ValidationError: If a field is missing or the email is malformed
            ConflictError: If the email is already registered
        """
        ...

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """
        Check credentials and issue a fresh token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password wrong
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, malformed, tampered or expired
        """
        ...

    async def get_user(self, user_id: str) -> PublicUser:
        """
        Get a user's public profile by ID.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...
