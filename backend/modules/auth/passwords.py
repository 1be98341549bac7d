"""
Password hashing.

Salted, deliberately slow pbkdf2-sha256 digests via passlib. Each call
to hash() draws a fresh salt, so equal passwords produce different digests.
"""

import logging

from passlib.context import CryptContext

from .exceptions import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way hashing and constant-time verification of passwords."""

    def __init__(self, rounds: int = 29000):
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            HashingError: If the backend fails (e.g. no entropy source)
        """
        try:
            return self._context.hash(plaintext)
        except (ValueError, TypeError, OSError) as e:
            logger.error("Password hashing failed: %s", type(e).__name__)
            raise HashingError() from e

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check a plaintext password against a stored digest.

        Returns False on mismatch. Only a structurally invalid digest
        raises.

        Raises:
            HashingError: If the digest cannot be identified or parsed
        """
        if not digest:
            raise HashingError("Stored password digest is empty")
        try:
            return self._context.verify(plaintext, digest)
        except (ValueError, TypeError) as e:
            logger.error("Stored password digest is unusable: %s", e)
            raise HashingError("Stored password digest is invalid") from e
