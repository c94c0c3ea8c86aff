# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from xsslab.application.use_cases.comments.create_comment import CreateCommentUseCase
from xsslab.application.use_cases.comments.list_comments import (
    ListPostCommentsUseCase,
    ListUserCommentsUseCase,
)
from xsslab.interfaces.http.dto.comments import (
    CommentDTO,
    CommentListResponseDTO,
    CommentResponseDTO,
    CreateCommentRequestDTO,
    UserCommentDTO,
    UserCommentListResponseDTO,
)
from xsslab.interfaces.http.request_utils import ensure_valid, json_body, parse_body
from xsslab.shared.errors import failure_message
from xsslab.shared.logging import logger
from xsslab.shared.middleware.session import login_required, require_principal
from xsslab.shared.validation import validate_create_comment


class CommentsController:
    def __init__(
        self,
        *,
        create_comment: CreateCommentUseCase,
        list_post_comments: ListPostCommentsUseCase,
        list_user_comments: ListUserCommentsUseCase,
    ) -> None:
        self._create_comment = create_comment
        self._list_post_comments = list_post_comments
        self._list_user_comments = list_user_comments

    @failure_message("Failed to create comment")
    @login_required("You must be logged in to comment")
    def create(self) -> tuple[Response, int]:
        author = require_principal()
        body = json_body()
        ensure_valid(validate_create_comment(body))
        dto = parse_body(CreateCommentRequestDTO, body)

        comment = self._create_comment.execute(author, dto.post_uuid, dto.content)
        logger.info(
            f"comments.create: ok comment={comment.comment_id} post={comment.post_uuid}"
        )
        payload = CommentResponseDTO(comment=CommentDTO.model_validate(comment))
        return jsonify(payload.model_dump()), 201

    @failure_message("Failed to get comments")
    def list_for_post(self, post_uuid: str) -> Response:
        comments = self._list_post_comments.execute(post_uuid)
        payload = CommentListResponseDTO(
            comments=[CommentDTO.model_validate(c) for c in comments]
        )
        return jsonify(payload.model_dump())

    @failure_message("Failed to get your comments")
    @login_required("You must be logged in to view your comments")
    def list_mine(self) -> Response:
        comments = self._list_user_comments.execute(require_principal())
        payload = UserCommentListResponseDTO(
            comments=[UserCommentDTO.model_validate(c) for c in comments]
        )
        return jsonify(payload.model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("comments", __name__, url_prefix="/api")
        bp.add_url_rule("/comments", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/comments/my", view_func=self.list_mine, methods=["GET"])
        bp.add_url_rule(
            "/posts/<ident:post_uuid>/comments",
            view_func=self.list_for_post,
            methods=["GET"],
        )
        return bp
