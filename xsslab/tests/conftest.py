from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient
from werkzeug.test import TestResponse

from xsslab.app import create_app
from xsslab.shared.config import AppConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "xsslab-test-secret-0123456789abcdef0123456789"


@pytest.fixture()
def make_config(tmp_path: Path) -> Callable[..., AppConfig]:
    def factory(**overrides: object) -> AppConfig:
        values: dict[str, object] = {
            "app_env": "test",
            "secret_key": TEST_SECRET,
            "cors_origin": "*",
            "log_level": "WARNING",
            "database": DatabaseConfig(url=f"sqlite:///{tmp_path / 'xsslab.db'}"),
            "security": SecurityConfig(cookie_samesite="Lax", cookie_secure=False),
        }
        values.update(overrides)
        return AppConfig(**values)

    return factory


@pytest.fixture()
def config(make_config: Callable[..., AppConfig]) -> AppConfig:
    return make_config()


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(config)
    yield flask_app
    flask_app.extensions["xsslab.container"].database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def register() -> Callable[..., TestResponse]:
    def _register(
        client: FlaskClient, username: str, password: str = "password1", name: str = "Tester"
    ) -> TestResponse:
        return client.post(
            "/api/auth/register",
            json={"username": username, "password": password, "name": name},
        )

    return _register
