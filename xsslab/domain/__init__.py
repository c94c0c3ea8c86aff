# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .comments.entities import Comment
from .posts.entities import Post
from .posts.exceptions import PostNotFoundError
from .users.entities import Principal, User
from .users.exceptions import InvalidCredentialsError, UsernameTakenError

__all__ = [
    "Comment",
    "InvalidCredentialsError",
    "Post",
    "PostNotFoundError",
    "Principal",
    "User",
    "UsernameTakenError",
]
