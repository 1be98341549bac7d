"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    This model is populated from verified token claims and made available
    to route handlers via dependency injection. It carries only what the
    token proves; the stored profile is fetched separately when needed.
    """

    id: str = Field(..., description="User ID (token subject)")
    is_admin: bool = Field(default=False, description="Whether the user may edit the catalog")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
