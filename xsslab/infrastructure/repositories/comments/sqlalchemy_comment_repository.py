# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import Select, delete, select

from xsslab.domain.comments.entities import Comment as DomainComment
from xsslab.domain.comments.repositories import CommentRepository
from xsslab.infrastructure.db import Database
from xsslab.infrastructure.db.models import Comment, Post, User


def _joined() -> Select:
    return select(
        Comment.comment_id,
        Comment.content,
        Comment.user_uuid,
        Comment.post_uuid,
        User.username,
        User.name.label("user_name"),
    ).join(User, Comment.user_uuid == User.uuid)


def _to_domain(row, *, with_title: bool = False) -> DomainComment:
    return DomainComment(
        comment_id=row.comment_id,
        content=row.content,
        user_uuid=row.user_uuid,
        post_uuid=row.post_uuid,
        username=row.username,
        user_name=row.user_name,
        post_title=row.post_title if with_title else None,
    )


class SqlAlchemyCommentRepository(CommentRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def add(self, comment: DomainComment) -> None:
        with self._db.session_scope() as session:
            session.add(
                Comment(
                    comment_id=comment.comment_id,
                    content=comment.content,
                    user_uuid=comment.user_uuid,
                    post_uuid=comment.post_uuid,
                )
            )

    def get(self, comment_id: str) -> DomainComment | None:
        with self._db.session_scope() as session:
            row = session.execute(_joined().where(Comment.comment_id == comment_id)).first()
            return _to_domain(row) if row else None

    def list_for_post(self, post_uuid: str) -> list[DomainComment]:
        stmt = _joined().where(Comment.post_uuid == post_uuid).order_by(Comment.comment_id.asc())
        with self._db.session_scope() as session:
            return [_to_domain(row) for row in session.execute(stmt)]

    def list_by_user(self, user_uuid: str) -> list[DomainComment]:
        stmt = (
            _joined()
            .add_columns(Post.title.label("post_title"))
            .join(Post, Comment.post_uuid == Post.post_uuid)
            .where(Comment.user_uuid == user_uuid)
            .order_by(Comment.comment_id.desc())
        )
        with self._db.session_scope() as session:
            return [_to_domain(row, with_title=True) for row in session.execute(stmt)]

    def delete_all(self) -> int:
        with self._db.session_scope() as session:
            result = session.execute(delete(Comment))
            return int(result.rowcount or 0)
