# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from xsslab.application.use_cases.posts.create_post import CreatePostUseCase
from xsslab.application.use_cases.posts.delete_all_posts import DeleteAllPostsUseCase
from xsslab.application.use_cases.posts.list_posts import (
    GetPostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    SearchPostsUseCase,
)
from xsslab.interfaces.http.dto.posts import (
    CreatePostRequestDTO,
    DeleteAllPostsDTO,
    PostDTO,
    PostListResponseDTO,
    PostResponseDTO,
)
from xsslab.interfaces.http.request_utils import (
    ensure_valid,
    json_body,
    pagination_args,
    parse_body,
)
from xsslab.shared.errors import failure_message
from xsslab.shared.logging import logger
from xsslab.shared.middleware.session import login_required, require_principal
from xsslab.shared.validation import validate_create_post, validate_search_query


class PostsController:
    def __init__(
        self,
        *,
        create_post: CreatePostUseCase,
        list_posts: ListPostsUseCase,
        list_user_posts: ListUserPostsUseCase,
        search_posts: SearchPostsUseCase,
        get_post: GetPostUseCase,
        delete_all_posts: DeleteAllPostsUseCase | None = None,
    ) -> None:
        self._create_post = create_post
        self._list_posts = list_posts
        self._list_user_posts = list_user_posts
        self._search_posts = search_posts
        self._get_post = get_post
        self._delete_all_posts = delete_all_posts

    @failure_message("Failed to create post")
    @login_required("You must be logged in to create a post")
    def create(self) -> tuple[Response, int]:
        author = require_principal()
        body = json_body()
        ensure_valid(validate_create_post(body))
        dto = parse_body(CreatePostRequestDTO, body)

        post = self._create_post.execute(author, dto.title, dto.content)
        logger.info(f"posts.create: ok post={post.post_uuid} user={author.uuid}")
        return jsonify(PostResponseDTO(post=PostDTO.model_validate(post)).model_dump()), 201

    @failure_message("Failed to get posts")
    def list_all(self) -> Response:
        limit, offset = pagination_args()
        posts = self._list_posts.execute(limit, offset)
        return jsonify(_post_list(posts))

    @failure_message("Failed to get your posts")
    @login_required("You must be logged in to view your posts")
    def list_mine(self) -> Response:
        owner = require_principal()
        limit, offset = pagination_args()
        posts = self._list_user_posts.execute(owner, limit, offset)
        return jsonify(_post_list(posts))

    @failure_message("Failed to search posts")
    def search(self) -> Response:
        query = request.args.get("q", "")
        limit, offset = pagination_args()
        ensure_valid(validate_search_query(query))

        posts = self._search_posts.execute(query, limit, offset)
        return jsonify(_post_list(posts))

    @failure_message("Failed to get post")
    def get_one(self, post_uuid: str) -> Response:
        post = self._get_post.execute(post_uuid)
        return jsonify(PostResponseDTO(post=PostDTO.model_validate(post)).model_dump())

    @failure_message("Failed to delete all posts")
    def delete_all(self) -> Response:
        if self._delete_all_posts is None:
            raise RuntimeError("delete-all is not configured")
        deleted = self._delete_all_posts.execute()
        logger.warning(f"posts.delete_all: removed {deleted} posts and every comment")
        return jsonify(DeleteAllPostsDTO(deleted_posts=deleted).model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/api/posts")
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("", view_func=self.list_all, methods=["GET"])
        bp.add_url_rule("/my", view_func=self.list_mine, methods=["GET"])
        bp.add_url_rule("/search", view_func=self.search, methods=["GET"])
        bp.add_url_rule("/<ident:post_uuid>", view_func=self.get_one, methods=["GET"])
        if self._delete_all_posts is not None:
            bp.add_url_rule("", view_func=self.delete_all, methods=["DELETE"])
        return bp


def _post_list(posts) -> dict:
    return PostListResponseDTO(posts=[PostDTO.model_validate(p) for p in posts]).model_dump()
