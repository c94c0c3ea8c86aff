# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac

from werkzeug.security import check_password_hash, generate_password_hash

from xsslab.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return str(generate_password_hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        return bool(check_password_hash(hashed, password))


class Sha256PasswordHasher(PasswordHasher):
    """Unsalted hex SHA-256 digest, kept for reproducing the lab's weak storage."""

    def hash(self, password: str) -> str:
        return hashlib.sha256(password.encode("utf-8")).hexdigest()

    def verify(self, password: str, hashed: str) -> bool:
        return hmac.compare_digest(self.hash(password), hashed)


def build_password_hasher(kind: str) -> PasswordHasher:
    if kind == "sha256":
        return Sha256PasswordHasher()
    return WerkzeugPasswordHasher()
