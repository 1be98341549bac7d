"""
Authentication service implementation.

Registers users, checks credentials and validates bearer tokens.
Store and hashing calls are blocking, so they run in worker threads.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

import anyio
from email_validator import validate_email, EmailNotValidError

from shared.models import AuthenticatedUser

from .interfaces import IAuthService, IUserRepository
from .models import AuthResponse, PublicUser, UserRecord
from .passwords import PasswordHasher
from .tokens import TokenService
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidEmailError,
    MissingFieldsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _missing_fields(**fields: Optional[str]) -> list[str]:
    return [name for name, value in fields.items() if not value or not value.strip()]


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are stored as salted digests; identity travels in stateless
    signed tokens, so there is no session table to consult.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResponse:
        """Create a user; the very first user becomes an admin."""
        missing = _missing_fields(name=name, email=email, password=password)
        if missing:
            raise MissingFieldsError(missing)

        try:
            validate_email(email.strip(), check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(str(e)) from e
        email = normalize_email(email)

        # Fail before anything is stored if the account could not be signed in
        self._tokens.ensure_configured()

        existing = await anyio.to_thread.run_sync(self._users.get_by_email, email)
        if existing is not None:
            logger.info("Registration rejected: email already registered")
            raise EmailAlreadyRegisteredError(email)

        password_hash = await anyio.to_thread.run_sync(self._hasher.hash, password)

        # No lock: two simultaneous first registrations may both become admin
        is_admin = await anyio.to_thread.run_sync(self._users.count) == 0

        now = datetime.now(timezone.utc).isoformat()
        user = await anyio.to_thread.run_sync(
            self._users.create,
            {
                "id": str(uuid.uuid4()),
                "name": name.strip(),
                "email": email,
                "password_hash": password_hash,
                "is_admin": is_admin,
                "created_at": now,
                "updated_at": now,
            },
        )
        logger.info("Registered user %s (admin=%s)", user.id, user.is_admin)
        return self._issue_for(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """Check credentials; unknown email and wrong password look the same."""
        missing = _missing_fields(email=email, password=password)
        if missing:
            raise MissingFieldsError(missing)

        user = await anyio.to_thread.run_sync(self._users.get_by_email, normalize_email(email))
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()

        valid = await anyio.to_thread.run_sync(self._hasher.verify, password, user.password_hash)
        if not valid:
            logger.info("Login failed for user %s: wrong password", user.id)
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return self._issue_for(user)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """Verify a bearer token; see TokenService.verify for the failures."""
        claims = self._tokens.verify(token)
        return claims.to_user()

    async def get_user(self, user_id: str) -> PublicUser:
        user = await anyio.to_thread.run_sync(self._users.get_by_id, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_public()

    def _issue_for(self, user: UserRecord) -> AuthResponse:
        token = self._tokens.issue(user.id, user.is_admin)
        return AuthResponse(token=token, user=user.to_public())
