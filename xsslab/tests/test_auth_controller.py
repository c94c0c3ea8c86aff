from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from xsslab.application.use_cases.users.login_user import LoginUserUseCase
from xsslab.application.use_cases.users.register_user import RegisterUserUseCase
from xsslab.domain.users.entities import User
from xsslab.domain.users.exceptions import InvalidCredentialsError, UsernameTakenError
from xsslab.interfaces.http.controllers.auth_controller import AuthController
from xsslab.shared.config import SecurityConfig
from xsslab.shared.middleware.error_handler import configure_error_handling

ALICE = User(
    uuid="u-alice",
    username="alice",
    password_hash="hash",
    name="Alice",
    time_create=1_700_000_000,
)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _controller(register=None, login=None, **security: object) -> AuthController:
    return AuthController(
        register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login or MagicMock()),
        security=SecurityConfig(**security),
    )


def test_register_endpoint_sets_cookie(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str, name: str) -> tuple[User, str]:
            register_called["args"] = (username, password, name)
            return ALICE, "token123"

    flask_app.register_blueprint(_controller(register=StubRegister()).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "password1", "name": "Alice"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "password1", "Alice")
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["user"] == {"uuid": "u-alice", "username": "alice", "name": "Alice"}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("auth_token=token123")
    assert "HttpOnly" in cookie
    assert "Path=/" in cookie
    assert "Max-Age=604800" in cookie
    assert "SameSite=Lax" in cookie


def test_register_invalid_payload_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(register=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"username": "ab", "password": "12345", "name": "A"}
        )

    assert response.status_code == 400
    assert response.get_json()["message"] == (
        "Username must be at least 3 characters; Password must be at least 6 characters"
    )
    register.execute.assert_not_called()


def test_register_duplicate_returns_409(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UsernameTakenError()
    flask_app.register_blueprint(_controller(register=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "password1", "name": "Alice"},
        )

    assert response.status_code == 409
    assert response.get_json() == {"success": False, "message": "Username already exists"}


def test_register_unexpected_failure_returns_500_envelope(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = RuntimeError("disk full")
    flask_app.register_blueprint(_controller(register=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "password1", "name": "Alice"},
        )

    assert response.status_code == 500
    assert response.get_json() == {
        "success": False,
        "message": "Registration failed",
        "error": "disk full",
    }


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "alice", "password": "x"})

    assert response.status_code == 401
    assert response.get_json()["message"] == "Invalid username or password"
    assert "Set-Cookie" not in response.headers


def test_logout_clears_cookie_with_matching_attributes(flask_app: Flask) -> None:
    flask_app.register_blueprint(
        _controller(cookie_samesite="None", cookie_secure=False).as_blueprint()
    )

    with flask_app.test_client() as client:
        response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "message": "Logout successful"}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("auth_token=;")
    assert "Max-Age=0" in cookie
    assert "SameSite=None" in cookie
    assert "Secure" in cookie
