# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from xsslab.domain.comments.entities import Comment
from xsslab.domain.comments.repositories import CommentRepository
from xsslab.domain.posts.exceptions import PostNotFoundError
from xsslab.domain.posts.repositories import PostRepository
from xsslab.domain.users.entities import Principal


class ListPostCommentsUseCase:
    def __init__(self, *, posts: PostRepository, comments: CommentRepository) -> None:
        self._posts = posts
        self._comments = comments

    def execute(self, post_uuid: str) -> Sequence[Comment]:
        if not self._posts.exists(post_uuid):
            raise PostNotFoundError()
        return self._comments.list_for_post(post_uuid)


class ListUserCommentsUseCase:
    def __init__(self, *, comments: CommentRepository) -> None:
        self._comments = comments

    def execute(self, owner: Principal) -> Sequence[Comment]:
        return self._comments.list_by_user(owner.uuid)
