# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
import uuid

from xsslab.domain.posts.entities import Post
from xsslab.domain.posts.exceptions import PostNotFoundError
from xsslab.domain.posts.repositories import PostRepository
from xsslab.domain.users.entities import Principal


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, author: Principal, title: str, content: str) -> Post:
        post = Post(
            post_uuid=str(uuid.uuid4()),
            title=title,
            content=content,
            time_create=int(time.time()),
            user_uuid=author.uuid,
        )
        self._posts.add(post)

        created = self._posts.get(post.post_uuid)
        if created is None:
            # Owner row vanished between insert and re-read.
            raise PostNotFoundError()
        return created
