from __future__ import annotations

import time

from flask import Flask, jsonify, request

from xsslab.infrastructure.auth.tokens import SessionTokenCodec, sign
from xsslab.shared.middleware.error_handler import configure_error_handling
from xsslab.shared.middleware.session import (
    AUTH_COOKIE,
    authenticate,
    configure_session,
    current_principal,
    login_required,
)

SECRET = "session-test-secret-0123456789abcdef0123456789"


def _session_app() -> tuple[Flask, SessionTokenCodec]:
    codec = SessionTokenCodec(SECRET)
    app = Flask(__name__)
    configure_error_handling(app)
    configure_session(app, codec)

    @app.get("/whoami")
    def whoami():
        principal = current_principal()
        return jsonify({"uuid": principal.uuid if principal else None})

    @app.get("/private")
    @login_required("You must be logged in")
    def private():
        return jsonify({"ok": True})

    return app, codec


def test_cookie_takes_precedence_over_bearer() -> None:
    app, codec = _session_app()
    client = app.test_client()
    client.set_cookie(AUTH_COOKIE, codec.issue("from-cookie", "alice"))

    response = client.get(
        "/whoami", headers={"Authorization": f"Bearer {codec.issue('from-header', 'bob')}"}
    )

    assert response.get_json() == {"uuid": "from-cookie"}


def test_bearer_header_is_accepted() -> None:
    app, codec = _session_app()

    response = app.test_client().get(
        "/whoami", headers={"Authorization": f"Bearer {codec.issue('u-1', 'alice')}"}
    )

    assert response.get_json() == {"uuid": "u-1"}


def test_invalid_tokens_are_anonymous() -> None:
    app, _ = _session_app()
    expired = sign({"uuid": "u-1", "username": "a", "exp": int(time.time()) - 10}, SECRET)

    with app.test_request_context("/", headers={"Authorization": f"Bearer {expired}"}):
        assert authenticate(request, SessionTokenCodec(SECRET)) is None

    response = app.test_client().get("/whoami", headers={"Authorization": "Bearer junk"})
    assert response.status_code == 200
    assert response.get_json() == {"uuid": None}


def test_login_required_returns_401_envelope() -> None:
    app, _ = _session_app()

    response = app.test_client().get("/private")

    assert response.status_code == 401
    assert response.get_json() == {"success": False, "message": "You must be logged in"}
