# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, Response, jsonify

from xsslab.infrastructure.db import Database
from xsslab.infrastructure.health import check_database, inspect_database
from xsslab.shared.config import AppConfig
from xsslab.shared.errors import ServiceUnavailableError
from xsslab.shared.logging import logger

ENDPOINTS = {
    "auth": {
        "register": "POST /api/auth/register",
        "login": "POST /api/auth/login",
        "logout": "POST /api/auth/logout",
    },
    "posts": {
        "create": "POST /api/posts",
        "getAll": "GET /api/posts",
        "getMy": "GET /api/posts/my",
        "search": "GET /api/posts/search?q=query",
        "getOne": "GET /api/posts/:id",
    },
    "comments": {
        "create": "POST /api/comments",
        "getByPost": "GET /api/posts/:id/comments",
        "getMy": "GET /api/comments/my",
    },
    "health": {
        "full": "GET /api/health",
        "database": "GET /api/health/db",
        "databaseDetailed": "GET /api/health/db/detailed",
    },
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MiscController:
    def __init__(self, *, db: Database, config: AppConfig) -> None:
        self._db = db
        self._config = config

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/api/health/db", view_func=self.health_db, methods=["GET"])
        bp.add_url_rule(
            "/api/health/db/detailed", view_func=self.health_db_detailed, methods=["GET"]
        )
        return bp

    def index(self) -> Response:
        return jsonify(
            {
                "success": True,
                "message": "XSS Lab API is running",
                "version": self._config.api_version,
                "environment": self._config.app_env,
                "endpoints": ENDPOINTS,
            }
        )

    def health(self) -> tuple[Response, int]:
        database: dict[str, object]
        try:
            elapsed = check_database(self._db)
            database = {"status": "healthy", "responseTime": f"{elapsed}ms"}
        except Exception as exc:
            logger.warning(f"health: database check failed: {exc}")
            database = {"status": "unhealthy", "error": str(exc) or "Database check failed"}

        healthy = database["status"] == "healthy"
        payload = {
            "status": "healthy" if healthy else "degraded",
            "timestamp": _now_iso(),
            "version": self._config.api_version,
            "environment": self._config.app_env,
            "services": {"database": database, "api": {"status": "healthy"}},
        }
        return jsonify(payload), 200 if healthy else 503

    def health_db(self) -> Response:
        try:
            elapsed = check_database(self._db)
        except Exception as exc:
            logger.warning(f"health.db: connection failed: {exc}")
            raise ServiceUnavailableError(
                "Database connection failed", error=str(exc) or "Unknown error"
            ) from exc

        return jsonify(
            {
                "success": True,
                "database": {
                    "status": "healthy",
                    "connected": True,
                    "responseTime": f"{elapsed}ms",
                    "message": "Database connection is working properly",
                },
            }
        )

    def health_db_detailed(self) -> Response:
        try:
            report = inspect_database(self._db)
        except Exception as exc:
            logger.warning(f"health.db.detailed: connection failed: {exc}")
            raise ServiceUnavailableError(
                "Database connection failed", error=str(exc) or "Unknown error"
            ) from exc

        try:
            database: dict[str, object] = {
                "status": report.status,
                "connected": report.connected,
                "responseTime": f"{report.response_time_ms}ms",
                "tables": {
                    name: {"exists": table.exists, "count": table.count}
                    for name, table in report.tables.items()
                },
            }
            if report.error:
                database["tablesError"] = report.error
        except Exception as exc:
            raise ServiceUnavailableError(
                "Health check failed", error=str(exc) or "Unknown error"
            ) from exc

        return jsonify({"success": True, "timestamp": _now_iso(), "database": database})
