"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and the container creates the concrete implementations from Settings.

The container is built by create_app() and stored on app.state, so each
application (and each test) has its own services and store.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.movies.interfaces import IMovieService, IMovieRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and
    cached within the container.

    Pass `db` to reuse an existing Supabase client; otherwise one is
    created on first use when storage_backend is "supabase".
    """

    def __init__(self, settings: Settings, db: "Optional[Client]" = None) -> None:
        self.settings = settings
        self._db = db
        self._password_hasher: "PasswordHasher | None" = None
        self._tokens: "TokenService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._movie_repository: "IMovieRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._movie_service: "IMovieService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase client, connecting on first access."""
        if self._db is None:
            from shared.database import create_supabase_client
            self._db = create_supabase_client(self.settings)
        return self._db

    @property
    def password_hasher(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.password_hash_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "TokenService":
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                secret=self.settings.jwt_secret,
                ttl=timedelta(seconds=self.settings.token_ttl_seconds),
                algorithm=self.settings.jwt_algorithm,
            )
        return self._tokens

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository for the configured backend."""
        if self._user_repository is None:
            if self.settings.storage_backend == "memory":
                from modules.auth.repository import InMemoryUserRepository
                self._user_repository = InMemoryUserRepository()
            else:
                from modules.auth.repository import UserRepository
                self._user_repository = UserRepository(self.db, self.settings.users_table)
        return self._user_repository

    @property
    def movie_repository(self) -> "IMovieRepository":
        """Get the movie repository for the configured backend."""
        if self._movie_repository is None:
            if self.settings.storage_backend == "memory":
                from modules.movies.repository import InMemoryMovieRepository
                self._movie_repository = InMemoryMovieRepository()
            else:
                from modules.movies.repository import MovieRepository
                self._movie_repository = MovieRepository(self.db, self.settings.movies_table)
        return self._movie_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.tokens,
            )
        return self._auth_service

    @property
    def movies(self) -> "IMovieService":
        """Get the movie service instance."""
        if self._movie_service is None:
            from modules.movies.service import MovieService
            self._movie_service = MovieService(repository=self.movie_repository)
        return self._movie_service

    def reset(self) -> None:
        """
        Reset all cached services.

        The in-memory store is dropped with its repositories.
        """
        self._password_hasher = None
        self._tokens = None
        self._user_repository = None
        self._movie_repository = None
        self._auth_service = None
        self._movie_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_app_settings(container: ServiceContainer = Depends(get_container)) -> Settings:
    """FastAPI dependency for the settings the app was built with."""
    return container.settings


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_movie_service(container: ServiceContainer = Depends(get_container)) -> "IMovieService":
    """FastAPI dependency for movie service."""
    return container.movies
