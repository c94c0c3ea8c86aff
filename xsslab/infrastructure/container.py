# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from xsslab.application.services.password_hashing import build_password_hasher
from xsslab.application.use_cases.comments.create_comment import CreateCommentUseCase
from xsslab.application.use_cases.comments.list_comments import (
    ListPostCommentsUseCase,
    ListUserCommentsUseCase,
)
from xsslab.application.use_cases.posts.create_post import CreatePostUseCase
from xsslab.application.use_cases.posts.delete_all_posts import DeleteAllPostsUseCase
from xsslab.application.use_cases.posts.list_posts import (
    GetPostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    SearchPostsUseCase,
)
from xsslab.application.use_cases.users.login_user import LoginUserUseCase
from xsslab.application.use_cases.users.register_user import RegisterUserUseCase
from xsslab.domain.users.repositories import PasswordHasher
from xsslab.infrastructure.auth.tokens import SessionTokenCodec
from xsslab.infrastructure.db import Database
from xsslab.infrastructure.repositories.comments.sqlalchemy_comment_repository import (
    SqlAlchemyCommentRepository,
)
from xsslab.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from xsslab.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from xsslab.interfaces.http.controllers.auth_controller import AuthController
from xsslab.interfaces.http.controllers.comments_controller import CommentsController
from xsslab.interfaces.http.controllers.misc_controller import MiscController
from xsslab.interfaces.http.controllers.posts_controller import PostsController
from xsslab.shared.config import AppConfig


class Container:
    """Wires one application instance. Each ``create_app`` call builds its own."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return build_password_hasher(self.config.password_hasher)

    @cached_property
    def token_codec(self) -> SessionTokenCodec:
        return SessionTokenCodec(
            self.config.secret_key,
            lifetime_seconds=self.config.security.token_lifetime,
        )

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.database)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(self.database)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def delete_all_posts_use_case(self) -> DeleteAllPostsUseCase | None:
        if not self.config.lab_delete_all_enabled:
            return None
        return DeleteAllPostsUseCase(posts=self.post_repository, comments=self.comment_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self.config.security,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        posts = self.post_repository
        return PostsController(
            create_post=CreatePostUseCase(posts=posts),
            list_posts=ListPostsUseCase(posts=posts),
            list_user_posts=ListUserPostsUseCase(posts=posts),
            search_posts=SearchPostsUseCase(posts=posts),
            get_post=GetPostUseCase(posts=posts),
            delete_all_posts=self.delete_all_posts_use_case,
        )

    @cached_property
    def comments_controller(self) -> CommentsController:
        return CommentsController(
            create_comment=CreateCommentUseCase(
                posts=self.post_repository, comments=self.comment_repository
            ),
            list_post_comments=ListPostCommentsUseCase(
                posts=self.post_repository, comments=self.comment_repository
            ),
            list_user_comments=ListUserCommentsUseCase(comments=self.comment_repository),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(db=self.database, config=self.config)
