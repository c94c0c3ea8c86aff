# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from dataclasses import dataclass, field

from sqlalchemy import text

from xsslab.infrastructure.db import Database

MONITORED_TABLES = ("users", "posts", "comments")


@dataclass(slots=True)
class TableReport:
    exists: bool
    count: int = 0


@dataclass(slots=True)
class DatabaseReport:
    status: str
    connected: bool
    response_time_ms: int | None = None
    tables: dict[str, TableReport] = field(default_factory=dict)
    error: str | None = None


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def check_database(db: Database) -> int:
    """Run ``SELECT 1`` and return the round-trip time in milliseconds."""
    start = time.perf_counter()
    with db.engine.connect() as connection:
        value = connection.execute(text("SELECT 1 AS test")).scalar()
    if value != 1:
        raise RuntimeError("Unexpected query result")
    return _elapsed_ms(start)


def inspect_database(db: Database) -> DatabaseReport:
    """Connection check followed by a row count per table.

    Connection failures propagate. A failure while counting leaves the report
    ``degraded`` with the error recorded.
    """
    elapsed = check_database(db)
    report = DatabaseReport(status="unknown", connected=True, response_time_ms=elapsed)
    try:
        with db.engine.connect() as connection:
            for table in MONITORED_TABLES:
                count = connection.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()
                report.tables[table] = TableReport(exists=True, count=int(count or 0))
        report.status = "healthy"
    except Exception as exc:
        report.status = "degraded"
        report.error = str(exc) or "Could not check tables"
    return report


__all__ = ["DatabaseReport", "TableReport", "check_database", "inspect_database"]
