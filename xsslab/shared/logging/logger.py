# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup shared by the API process and the test suite.

Every record carries two extras, ``correlation_id`` and ``user``, filled from
context variables so that log lines emitted deep inside a repository still
point back at the request and principal that caused them.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_ANONYMOUS = "-"

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> "
    "<yellow>{extra[user]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default=_ANONYMOUS)
_USER: ContextVar[str] = ContextVar("log_user", default=_ANONYMOUS)

_logger.configure(extra={"correlation_id": _ANONYMOUS, "user": _ANONYMOUS})

# Stdlib loggers that are noisy at DEBUG and add nothing the request log lacks.
_QUIET_LOGGERS = {"werkzeug": logging.INFO, "sqlalchemy.engine": logging.WARNING}


def _context() -> dict[str, str]:
    return {"correlation_id": _CORRELATION_ID.get(), "user": _USER.get()}


class _InterceptHandler(logging.Handler):
    """Forward stdlib logging (werkzeug, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(**_context()).log(
            level, record.getMessage()
        )


class ContextualLogger:
    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or _ANONYMOUS)


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def set_log_user(user_id: str | None) -> None:
    _USER.set(user_id or _ANONYMOUS)


def clear_correlation_id() -> None:
    _CORRELATION_ID.set(_ANONYMOUS)
    _USER.set(_ANONYMOUS)


def setup_logging(level: str | None = None) -> None:
    """Install stderr (and optional ``LOG_FILE``) sinks. Safe to call repeatedly."""
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    serialize = os.getenv("LOG_JSON", "").lower() in ("1", "true", "yes")

    _logger.remove()
    _logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        filter=sanitize_record,
        colorize=not serialize and sys.stderr.isatty(),
        serialize=serialize,
        backtrace=False,
        diagnose=False,
    )

    log_file = os.getenv("LOG_FILE")
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        _logger.add(
            log_file,
            level=level,
            format=_FMT,
            filter=sanitize_record,
            serialize=serialize,
            enqueue=True,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


logger = ContextualLogger()

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "set_log_user",
    "setup_logging",
]
