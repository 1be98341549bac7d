"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field

from shared.models import AuthenticatedUser


class TokenClaims(BaseModel):
    """Decoded bearer token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    is_admin: bool = Field(default=False, description="Admin flag at issuance")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    def to_user(self) -> AuthenticatedUser:
        return AuthenticatedUser(id=self.sub, is_admin=self.is_admin)


class UserRecord(BaseModel):
    """
    A stored user, including the password hash.

    Only the repository and auth service see this model; everything
    that leaves the module goes through to_public().
    """

    id: str
    name: str
    email: str
    password_hash: str = Field(..., repr=False, exclude=True)
    is_admin: bool = False
    created_at: datetime
    updated_at: datetime

    def to_public(self) -> "PublicUser":
        return PublicUser(
            id=self.id,
            name=self.name,
            email=self.email,
            is_admin=self.is_admin,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class PublicUser(BaseModel):
    """User fields safe to return to clients."""

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Normalized email address")
    is_admin: bool = Field(default=False, description="Admin flag")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class RegisterRequest(BaseModel):
    """
    Registration payload.

    Fields are optional at the schema level so that missing values are
    reported as a single 400 by the service rather than a schema error.
    """

    name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("name", "username"),
        description="Display name (also accepted as 'username')",
    )
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login payload."""

    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """Token plus public profile returned by register and login."""

    token: str
    user: PublicUser
