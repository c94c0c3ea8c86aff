# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import Select, delete, func, or_, select

from xsslab.domain.posts.entities import Post as DomainPost
from xsslab.domain.posts.repositories import PostRepository
from xsslab.infrastructure.db import Database
from xsslab.infrastructure.db.models import Post, User


def _joined() -> Select:
    return select(
        Post.post_uuid,
        Post.title,
        Post.content,
        Post.time_create,
        Post.user_uuid,
        User.username,
        User.name.label("user_name"),
    ).join(User, Post.user_uuid == User.uuid)


def _to_domain(row) -> DomainPost:
    return DomainPost(
        post_uuid=row.post_uuid,
        title=row.title,
        content=row.content,
        time_create=row.time_create,
        user_uuid=row.user_uuid,
        username=row.username,
        user_name=row.user_name,
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def add(self, post: DomainPost) -> None:
        with self._db.session_scope() as session:
            session.add(
                Post(
                    post_uuid=post.post_uuid,
                    title=post.title,
                    content=post.content,
                    time_create=post.time_create,
                    user_uuid=post.user_uuid,
                )
            )

    def exists(self, post_uuid: str) -> bool:
        with self._db.session_scope() as session:
            found = session.scalar(select(Post.post_uuid).where(Post.post_uuid == post_uuid))
            return found is not None

    def get(self, post_uuid: str) -> DomainPost | None:
        with self._db.session_scope() as session:
            row = session.execute(_joined().where(Post.post_uuid == post_uuid)).first()
            return _to_domain(row) if row else None

    def _page(self, stmt: Select, limit: int, offset: int) -> list[DomainPost]:
        stmt = stmt.order_by(Post.time_create.desc()).limit(limit).offset(offset)
        with self._db.session_scope() as session:
            return [_to_domain(row) for row in session.execute(stmt)]

    def list_recent(self, limit: int, offset: int) -> list[DomainPost]:
        return self._page(_joined(), limit, offset)

    def list_by_user(self, user_uuid: str, limit: int, offset: int) -> list[DomainPost]:
        return self._page(_joined().where(Post.user_uuid == user_uuid), limit, offset)

    def search(self, query: str, limit: int, offset: int) -> list[DomainPost]:
        # Case sensitivity follows the backend's default LIKE collation.
        pattern = f"%{query}%"
        stmt = _joined().where(or_(Post.title.like(pattern), Post.content.like(pattern)))
        return self._page(stmt, limit, offset)

    def count(self) -> int:
        with self._db.session_scope() as session:
            return int(session.scalar(select(func.count()).select_from(Post)) or 0)

    def delete_all(self) -> int:
        with self._db.session_scope() as session:
            result = session.execute(delete(Post))
            return int(result.rowcount or 0)
