# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
import uuid

from xsslab.domain.users.entities import User
from xsslab.domain.users.exceptions import UsernameTakenError
from xsslab.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, name: str) -> tuple[User, str]:
        existing = self._users.find_by_username(username)
        if existing:
            raise UsernameTakenError()
        hashed = self._password_hasher.hash(password)
        user = User(
            uuid=str(uuid.uuid4()),
            username=username,
            password_hash=hashed,
            name=name,
            time_create=int(time.time()),
        )
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.uuid, persisted.username)
        return persisted, token
