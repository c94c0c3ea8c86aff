# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from xsslab.infrastructure.db.session import Base


class User(Base):
    __tablename__ = "users"
    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    # Unique at the storage layer: a concurrent duplicate registration fails on insert.
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    password: Mapped[str] = mapped_column(String(256))
    name: Mapped[str] = mapped_column(String(100))
    time_create: Mapped[int] = mapped_column(Integer)
    last_login: Mapped[int | None] = mapped_column(Integer, nullable=True)


class Post(Base):
    __tablename__ = "posts"
    post_uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    time_create: Mapped[int] = mapped_column(Integer, index=True)
    user_uuid: Mapped[str] = mapped_column(ForeignKey("users.uuid"), index=True)


class Comment(Base):
    __tablename__ = "comments"
    comment_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    content: Mapped[str] = mapped_column(Text)
    user_uuid: Mapped[str] = mapped_column(ForeignKey("users.uuid"), index=True)
    post_uuid: Mapped[str] = mapped_column(ForeignKey("posts.post_uuid"), index=True)
