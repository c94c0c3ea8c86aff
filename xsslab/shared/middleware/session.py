# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Protocol

from flask import Flask, Request, g, request

from xsslab.domain.users.entities import Principal
from xsslab.shared.errors import AuthenticationRequiredError
from xsslab.shared.logging import logger, set_log_user

AUTH_COOKIE = "auth_token"
_BEARER_PREFIX = "Bearer "


class TokenVerifier(Protocol):
    def verify(self, token: str) -> dict | None: ...


def extract_token(req: Request) -> str:
    token = req.cookies.get(AUTH_COOKIE, "")
    if token:
        return token
    auth = req.headers.get("Authorization", "")
    if auth.startswith(_BEARER_PREFIX):
        return auth[len(_BEARER_PREFIX):].strip()
    return ""


def authenticate(req: Request, verifier: TokenVerifier) -> Principal | None:
    token = extract_token(req)
    if not token:
        return None

    claims = verifier.verify(token)
    if claims is None:
        logger.debug(f"session: rejected token on {req.method} {req.path}")
        return None

    uuid = claims.get("uuid")
    username = claims.get("username")
    if not isinstance(uuid, str) or not isinstance(username, str):
        logger.debug("session: token claims missing subject")
        return None
    return Principal(uuid=uuid, username=username)


def current_principal() -> Principal | None:
    return getattr(g, "principal", None)


def require_principal(message: str = "Unauthorized") -> Principal:
    principal = current_principal()
    if principal is None:
        raise AuthenticationRequiredError(message)
    return principal


def login_required(message: str) -> Callable:
    """Reject anonymous callers with a 401 envelope before the view runs."""

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*args, **kwargs):
            require_principal(message)
            return f(*args, **kwargs)

        return inner

    return decorator


def configure_session(app: Flask, verifier: TokenVerifier) -> None:
    @app.before_request
    def _load_principal() -> None:
        g.principal = authenticate(request, verifier)
        if g.principal is not None:
            g.user_id = g.principal.uuid
            set_log_user(g.principal.uuid)


__all__ = [
    "AUTH_COOKIE",
    "TokenVerifier",
    "authenticate",
    "configure_session",
    "current_principal",
    "extract_token",
    "login_required",
    "require_principal",
]
