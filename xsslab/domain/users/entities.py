# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class User:

    uuid: str
    username: str
    password_hash: str
    name: str
    time_create: int
    last_login: int | None = None

    def public_view(self) -> dict[str, str]:
        return {"uuid": self.uuid, "username": self.username, "name": self.name}


@dataclass(slots=True, frozen=True)
class Principal:
    """Identity carried by a verified session token."""

    uuid: str
    username: str
