# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post


class PostRepository(Protocol):
    def add(self, post: Post) -> None: ...
    def exists(self, post_uuid: str) -> bool: ...
    def get(self, post_uuid: str) -> Post | None: ...
    def list_recent(self, limit: int, offset: int) -> Sequence[Post]: ...
    def list_by_user(self, user_uuid: str, limit: int, offset: int) -> Sequence[Post]: ...
    def search(self, query: str, limit: int, offset: int) -> Sequence[Post]: ...
    def count(self) -> int: ...
    def delete_all(self) -> int: ...
