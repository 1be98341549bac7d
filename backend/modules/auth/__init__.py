"""
Authentication module.

Handles password hashing, bearer tokens, registration and login.

Public API:
- IAuthService: Interface for auth operations
- PasswordHasher, TokenService: Credential primitives
- Models: TokenClaims, PublicUser, AuthResponse
- Auth exceptions: MissingTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import TokenClaims, PublicUser, UserRecord, AuthResponse
from .passwords import PasswordHasher
from .tokens import TokenService
from .exceptions import (
    AuthErrorKind,
    TokenError,
    MissingTokenError,
    MalformedTokenError,
    InvalidSignatureError,
    ExpiredTokenError,
    InvalidCredentialsError,
    AdminRequiredError,
    MissingFieldsError,
    InvalidEmailError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    HashingError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Primitives
    "PasswordHasher",
    "TokenService",
    # Models
    "TokenClaims",
    "PublicUser",
    "UserRecord",
    "AuthResponse",
    # Exceptions
    "AuthErrorKind",
    "TokenError",
    "MissingTokenError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "AdminRequiredError",
    "MissingFieldsError",
    "InvalidEmailError",
    "EmailAlreadyRegisteredError",
    "UserNotFoundError",
    "HashingError",
]
