# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Compact HS256 session tokens.

A token is ``header.payload.signature``. Each part is unpadded base64url.
The payload is signed, not encrypted, so anyone holding the token can read
the claims.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

import jwt
from jwt.exceptions import PyJWTError

from xsslab.domain.users.repositories import TokenIssuer
from xsslab.shared.config.settings import TOKEN_LIFETIME_SECONDS
from xsslab.shared.logging import logger

ALGORITHM = "HS256"


def sign(claims: Mapping[str, Any], secret: str) -> str:
    token = jwt.encode(dict(claims), secret, algorithm=ALGORITHM, headers={"typ": "JWT"})
    # PyJWT 2.x returns str; older type stubs may declare bytes
    return str(token)


def verify(token: str, secret: str) -> dict[str, Any] | None:
    """Return the claims of a valid token, or ``None``. Never raises."""
    if not isinstance(token, str) or token.count(".") != 2:
        return None
    if "=" in token:
        # Segments are unpadded base64url; PyJWT would tolerate padding.
        return None
    try:
        # Expiry is only enforced when the claim is present; exp <= now is rejected.
        return jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": [], "verify_aud": False, "verify_iss": False},
        )
    except PyJWTError as exc:
        logger.debug(f"token.verify: rejected ({type(exc).__name__})")
        return None
    except (TypeError, ValueError) as exc:
        logger.debug(f"token.verify: malformed ({type(exc).__name__})")
        return None


class SessionTokenCodec(TokenIssuer):
    def __init__(self, secret: str, *, lifetime_seconds: int = TOKEN_LIFETIME_SECONDS) -> None:
        self._secret = secret
        self._lifetime = lifetime_seconds

    @property
    def lifetime_seconds(self) -> int:
        return self._lifetime

    def sign(self, claims: Mapping[str, Any]) -> str:
        return sign(claims, self._secret)

    def verify(self, token: str) -> dict[str, Any] | None:
        return verify(token, self._secret)

    def issue(self, uuid: str, username: str) -> str:
        token = self.sign(
            {"uuid": uuid, "username": username, "exp": int(time.time()) + self._lifetime}
        )
        logger.info(f"Issued session token for user={uuid} ttl={self._lifetime}s")
        return token


__all__ = ["ALGORITHM", "SessionTokenCodec", "sign", "verify"]
