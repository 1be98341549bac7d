"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the
API error handlers with the status code of their base class.
"""

from enum import Enum

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)


class AuthErrorKind(str, Enum):
    """Why a credential was rejected."""

    MISSING = "missing"
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
    INVALID_CREDENTIALS = "invalid_credentials"


class TokenError(AuthenticationError):
    """Base for bearer token failures."""

    kind: AuthErrorKind = AuthErrorKind.MALFORMED


class MissingTokenError(TokenError):
    """Raised when no bearer token is provided."""

    kind = AuthErrorKind.MISSING

    def __init__(self, message: str = "Not authorized, no token"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(TokenError):
    """Raised when a token cannot be parsed or lacks required claims."""

    kind = AuthErrorKind.MALFORMED

    def __init__(self, message: str = "Not authorized, token failed"):
        super().__init__(message, code="MALFORMED_TOKEN")


class InvalidSignatureError(TokenError):
    """Raised when a token's signature does not match."""

    kind = AuthErrorKind.INVALID_SIGNATURE

    def __init__(self, message: str = "Not authorized, token failed"):
        super().__init__(message, code="INVALID_SIGNATURE")


class ExpiredTokenError(TokenError):
    """Raised when a token has expired."""

    kind = AuthErrorKind.EXPIRED

    def __init__(self, message: str = "Not authorized, token expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class InvalidCredentialsError(AuthenticationError):
    """Raised on login with an unknown email or a wrong password."""

    kind = AuthErrorKind.INVALID_CREDENTIALS

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class AdminRequiredError(AuthorizationError):
    """Raised when a non-admin calls an admin-only operation."""

    def __init__(self, user_id: str):
        super().__init__(
            "Forbidden, admin only",
            code="ADMIN_REQUIRED",
            details={"user_id": user_id},
        )


class MissingFieldsError(ValidationError):
    """Raised when required registration or login fields are absent."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "All fields required",
            code="MISSING_FIELDS",
            details={"fields": fields},
        )


class InvalidEmailError(ValidationError):
    """Raised when an email address is not well formed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid email address: {reason}",
            code="INVALID_EMAIL",
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering with an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "Email already registered",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """Raised when the authenticated user no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class HashingError(InternalError):
    """Raised when the password hasher fails or a stored digest is unusable."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message, code="HASHING_ERROR")
