# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from xsslab.domain.posts.entities import Post
from xsslab.domain.posts.exceptions import PostNotFoundError
from xsslab.domain.posts.repositories import PostRepository
from xsslab.domain.users.entities import Principal


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, limit: int, offset: int) -> Sequence[Post]:
        return self._posts.list_recent(limit, offset)


class ListUserPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, owner: Principal, limit: int, offset: int) -> Sequence[Post]:
        return self._posts.list_by_user(owner.uuid, limit, offset)


class SearchPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, query: str, limit: int, offset: int) -> Sequence[Post]:
        return self._posts.search(query, limit, offset)


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_uuid: str) -> Post:
        post = self._posts.get(post_uuid)
        if post is None:
            raise PostNotFoundError()
        return post
