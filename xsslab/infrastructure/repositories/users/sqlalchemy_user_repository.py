# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from xsslab.domain.users.entities import User as DomainUser
from xsslab.domain.users.exceptions import UsernameTakenError
from xsslab.domain.users.repositories import UserRepository
from xsslab.infrastructure.db import Database
from xsslab.infrastructure.db.models import User


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        uuid=row.uuid,
        username=row.username,
        password_hash=row.password,
        name=row.name,
        time_create=row.time_create,
        last_login=row.last_login,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def find_by_username(self, username: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = User(
                    uuid=user.uuid,
                    username=user.username,
                    password=user.password_hash,
                    name=user.name,
                    time_create=user.time_create,
                    last_login=user.last_login,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise UsernameTakenError() from exc

    def touch_last_login(self, uuid: str, timestamp: int) -> None:
        with self._db.session_scope() as session:
            session.execute(update(User).where(User.uuid == uuid).values(last_login=timestamp))
