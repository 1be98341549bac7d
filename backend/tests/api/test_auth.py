"""
Tests for bearer authentication, the admin gate and the auth endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service
from api.middleware.auth import ensure_admin
from modules.auth.exceptions import AdminRequiredError
from shared.models import AuthenticatedUser

from tests.conftest import create_test_token, make_settings


class TestAuthentication:
    """The bearer pipeline, exercised through GET /api/auth/me."""

    def test_missing_auth_header(self, client):
        """Request without auth header should return 401."""
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_TOKEN"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_non_bearer_scheme(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_TOKEN"

    def test_expired_token(self, client):
        """Protected route should return 401 with expired token."""
        token = create_test_token(expired=True)
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["error"] == "TOKEN_EXPIRED"
        assert "expired" in response.json()["message"].lower()

    def test_wrong_secret(self, client):
        token = create_test_token(secret="this-is-not-the-real-secret-at-all-no")
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SIGNATURE"

    def test_malformed_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer invalid-token"})
        assert response.status_code == 401
        assert response.json()["error"] == "MALFORMED_TOKEN"

    def test_valid_token_for_unknown_user(self, client, user_headers):
        """A valid token whose user is gone gets 404 from /me."""
        response = client.get("/api/auth/me", headers=user_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"

    def test_missing_jwt_secret(self):
        """An unconfigured secret is a server error, not a client one."""
        client = TestClient(create_app(make_settings(jwt_secret="")))
        token = create_test_token()
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"

    def test_register_without_secret_leaves_no_account(self):
        """A failed registration can be retried once the secret is set."""
        app = create_app(make_settings(jwt_secret=""))
        client = TestClient(app)
        response = client.post(
            "/api/auth/register",
            json={"name": "A", "email": "a@x.com", "password": "secret1"},
        )
        assert response.status_code == 500
        assert app.state.container.user_repository.count() == 0


class TestAdminGate:
    def test_admin_passes(self):
        user = AuthenticatedUser(id="user-1", is_admin=True)
        assert ensure_admin(user) is user

    def test_non_admin_rejected(self):
        with pytest.raises(AdminRequiredError):
            ensure_admin(AuthenticatedUser(id="user-1", is_admin=False))


class TestRegister:
    """Tests for POST /api/auth/register"""

    def test_register(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "A", "email": "a@x.com", "password": "secret1"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "a@x.com"
        assert data["user"]["is_admin"] is True
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

    def test_register_with_username(self, client):
        response = client.post(
            "/api/auth/register",
            json={"username": "ada", "email": "ada@x.com", "password": "secret1"},
        )
        assert response.status_code == 200
        assert response.json()["user"]["name"] == "ada"

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "a@x.com"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "MISSING_FIELDS"
        assert data["details"]["fields"] == ["name", "password"]

    def test_register_duplicate_email(self, client):
        body = {"name": "A", "email": "a@x.com", "password": "secret1"}
        client.post("/api/auth/register", json=body)
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 400
        assert response.json()["message"] == "Email already registered"

    def test_register_invalid_email(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "A", "email": "nope", "password": "secret1"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_EMAIL"


class TestLogin:
    """Tests for POST /api/auth/login"""

    @pytest.fixture
    def registered(self, client):
        return client.post(
            "/api/auth/register",
            json={"name": "A", "email": "a@x.com", "password": "secret1"},
        ).json()

    def test_login(self, client, registered):
        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
        assert response.status_code == 200
        assert response.json()["user"]["id"] == registered["user"]["id"]

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "a@x.com", "password": "wrong"},
            {"email": "nobody@x.com", "password": "secret1"},
        ],
    )
    def test_login_invalid_credentials(self, client, registered, body):
        """Unknown email and wrong password are indistinguishable."""
        response = client.post("/api/auth/login", json=body)
        assert response.status_code == 401
        assert response.json() == {
            "error": "INVALID_CREDENTIALS",
            "message": "Invalid credentials",
            "details": {},
        }

    def test_login_missing_fields(self, client):
        response = client.post("/api/auth/login", json={})
        assert response.status_code == 400

    def test_me_with_login_token(self, client, registered):
        token = client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
        ).json()["token"]
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["email"] == "a@x.com"


class TestServiceOverride:
    def test_routes_use_injected_service(self, app):
        """Routes resolve the auth service through the dependency."""
        mock_service = AsyncMock()
        mock_service.login.return_value = {
            "token": "t",
            "user": {
                "id": "user-1",
                "name": "A",
                "email": "a@x.com",
                "is_admin": False,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z",
            },
        }
        app.dependency_overrides[get_auth_service] = lambda: mock_service

        response = TestClient(app).post(
            "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
        )

        assert response.status_code == 200
        mock_service.login.assert_awaited_once_with("a@x.com", "secret1")
        app.dependency_overrides.clear()
