"""
Bearer token issuance and verification.

Tokens are HS256 JWTs carrying the subject id and admin flag. They are
never stored server-side; validity ends at expiry or on signature mismatch.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import InternalError

from .models import TokenClaims
from .exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingTokenError,
)

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ):
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def ensure_configured(self) -> None:
        """Raise InternalError now if tokens could not be issued later."""
        self._require_secret()

    def _require_secret(self) -> str:
        if not self._secret:
            raise InternalError("Token signing secret not configured", code="AUTH_NOT_CONFIGURED")
        return self._secret

    def issue(self, subject_id: str, is_admin: bool, now: Optional[datetime] = None) -> str:
        """
        Create a token for a user.

        Args:
            subject_id: The user ID to embed as the token subject
            is_admin: Admin flag to embed
            now: Issuance time (defaults to the current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": subject_id,
            "is_admin": is_admin,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._require_secret(), algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode and validate a token.

        Returns:
            TokenClaims with the decoded subject and admin flag

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token is past its expiry
            InvalidSignatureError: If the signature does not match
            MalformedTokenError: If the token cannot be parsed
        """
        if not token:
            raise MissingTokenError()

        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            return TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            raise InvalidSignatureError()
        except (jwt.InvalidTokenError, PydanticValidationError):
            raise MalformedTokenError()
