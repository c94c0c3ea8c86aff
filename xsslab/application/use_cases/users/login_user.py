# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from xsslab.domain.users.entities import User
from xsslab.domain.users.exceptions import InvalidCredentialsError
from xsslab.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


class LoginUserUseCase:
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

    def execute(self, username: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_username(username)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        if not password_valid or user is None:
            raise InvalidCredentialsError()

        self._users.touch_last_login(user.uuid, int(time.time()))

        token = self._tokens.issue(user.uuid, user.username)
        return user, token
