# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Wipe every post and comment; only routed when the lab hazard is switched on."""

from __future__ import annotations

from xsslab.domain.comments.repositories import CommentRepository
from xsslab.domain.posts.repositories import PostRepository


class DeleteAllPostsUseCase:
    def __init__(self, *, posts: PostRepository, comments: CommentRepository) -> None:
        self._posts = posts
        self._comments = comments

    def execute(self) -> int:
        deleted = self._posts.count()
        self._comments.delete_all()
        self._posts.delete_all()
        return deleted
