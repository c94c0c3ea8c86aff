# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from xsslab.shared.config import DatabaseConfig
from xsslab.shared.logging import logger


class Base(DeclarativeBase):
    pass


def build_engine(config: DatabaseConfig) -> Engine:
    kwargs: dict[str, object] = {"echo": False, "future": True, "pool_pre_ping": True}
    if config.url.startswith("sqlite"):
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
        if ":memory:" in config.url or config.url in ("sqlite://", "sqlite+pysqlite://"):
            # One shared connection, otherwise every checkout sees an empty database.
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )
    return create_engine(config.url, **kwargs)


class Database:
    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = build_engine(config)
        self._sessions = scoped_session(
            sessionmaker(
                bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
            )
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._sessions()
        logger.debug("db.session: opened scoped session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed scoped session")
        except IntegrityError as exc:
            # Constraint violations are expected; repositories map them to domain errors.
            logger.warning(f"db.session: constraint violation, rolling back ({exc.orig})")
            session.rollback()
            raise
        except Exception:
            logger.exception("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self._sessions.remove()
            logger.debug("db.session: closed scoped session")

    def init_schema(self) -> None:
        # Import registers the mapped tables on Base.metadata.
        from xsslab.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self._sessions.remove()
        self.engine.dispose()
