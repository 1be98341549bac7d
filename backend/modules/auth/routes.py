"""
Auth API endpoints.

Registration, login and the caller's own profile.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, PublicUser, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new user and return a token.

    The first account ever registered is granted admin rights.
    """
    return await service.register(request.name, request.email, request.password)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange email and password for a fresh token."""
    return await service.login(request.email, request.password)


@router.get("/me", response_model=PublicUser)
async def me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> PublicUser:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_user(user.id)
