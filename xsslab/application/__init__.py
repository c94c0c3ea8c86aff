# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import (
    Sha256PasswordHasher,
    WerkzeugPasswordHasher,
    build_password_hasher,
)
from .use_cases.comments.create_comment import CreateCommentUseCase
from .use_cases.comments.list_comments import ListPostCommentsUseCase, ListUserCommentsUseCase
from .use_cases.posts.create_post import CreatePostUseCase
from .use_cases.posts.delete_all_posts import DeleteAllPostsUseCase
from .use_cases.posts.list_posts import (
    GetPostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    SearchPostsUseCase,
)
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CreateCommentUseCase",
    "CreatePostUseCase",
    "DeleteAllPostsUseCase",
    "GetPostUseCase",
    "ListPostCommentsUseCase",
    "ListPostsUseCase",
    "ListUserCommentsUseCase",
    "ListUserPostsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SearchPostsUseCase",
    "Sha256PasswordHasher",
    "WerkzeugPasswordHasher",
    "build_password_hasher",
]
