# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from xsslab.domain.comments.entities import Comment
from xsslab.domain.comments.repositories import CommentRepository
from xsslab.domain.posts.exceptions import PostNotFoundError
from xsslab.domain.posts.repositories import PostRepository
from xsslab.domain.users.entities import Principal


class CreateCommentUseCase:
    def __init__(self, *, posts: PostRepository, comments: CommentRepository) -> None:
        self._posts = posts
        self._comments = comments

    def execute(self, author: Principal, post_uuid: str, content: str) -> Comment:
        # Existence check and insert are separate statements; a concurrent
        # delete-all can still land in between.
        if not self._posts.exists(post_uuid):
            raise PostNotFoundError()

        comment = Comment(
            comment_id=str(uuid.uuid4()),
            content=content,
            user_uuid=author.uuid,
            post_uuid=post_uuid,
        )
        self._comments.add(comment)

        created = self._comments.get(comment.comment_id)
        if created is None:
            raise PostNotFoundError()
        return created
