from __future__ import annotations

import pytest
from flask import Flask

from xsslab.shared.middleware.cors import (
    ALLOWED_METHODS,
    PREFLIGHT_MAX_AGE,
    configure_cors,
    parse_origins,
    resolve_cors,
)


@pytest.mark.parametrize(
    ("configured", "origin", "echoed", "credentials"),
    [
        ("*", None, "*", False),
        ("*", "http://b", "*", False),
        ("*,http://a", "http://b", "http://b", True),
        ("*,http://a", None, "http://a", True),
        ("http://a", "http://a", "http://a", True),
        ("http://a", "http://evil", "http://a", True),
        ("http://a,http://c", "http://c", "http://c", True),
        ("http://a,http://c", None, "http://a", True),
        ("", "http://b", "*", False),
    ],
)
def test_resolve_cors_table(
    configured: str, origin: str | None, echoed: str, credentials: bool
) -> None:
    decision = resolve_cors(origin, configured)
    assert decision.origin == echoed
    assert decision.allow_credentials is credentials


def test_parse_origins_trims_and_dedupes() -> None:
    assert parse_origins(" http://a , ,http://b,http://a ") == ["http://a", "http://b"]


def _cors_app(origins: str) -> Flask:
    app = Flask(__name__)
    configure_cors(app, origins)

    @app.get("/ping")
    def ping():
        return {"ok": True}

    return app


def test_actual_response_carries_cors_headers() -> None:
    client = _cors_app("http://a").test_client()

    response = client.get("/ping", headers={"Origin": "http://evil"})

    assert response.headers["Access-Control-Allow-Origin"] == "http://a"
    assert response.headers["Access-Control-Allow-Credentials"] == "true"


def test_wildcard_response_omits_credentials() -> None:
    client = _cors_app("*").test_client()

    response = client.get("/ping")

    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "Access-Control-Allow-Credentials" not in response.headers


def test_preflight_short_circuits_on_any_path() -> None:
    client = _cors_app("*,http://a").test_client()

    response = client.options("/no/such/route", headers={"Origin": "http://b"})

    assert response.status_code == 204
    assert response.headers["Access-Control-Allow-Origin"] == "http://b"
    assert response.headers["Access-Control-Allow-Methods"] == ALLOWED_METHODS
    assert response.headers["Access-Control-Max-Age"] == str(PREFLIGHT_MAX_AGE)
    assert "Origin" in response.headers.get("Vary", "")
