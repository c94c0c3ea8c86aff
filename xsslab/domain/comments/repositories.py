# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Comment


class CommentRepository(Protocol):
    def add(self, comment: Comment) -> None: ...
    def get(self, comment_id: str) -> Comment | None: ...
    def list_for_post(self, post_uuid: str) -> Sequence[Comment]: ...
    def list_by_user(self, user_uuid: str) -> Sequence[Comment]: ...
    def delete_all(self) -> int: ...
