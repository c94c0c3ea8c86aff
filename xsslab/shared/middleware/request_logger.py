# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
import uuid

from flask import Flask, Response, g, request

from xsslab.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"
_REDACTED_HEADERS = frozenset({"authorization", "cookie"})


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _visible_headers() -> dict[str, str]:
    return {
        key: "<redacted>" if key.lower() in _REDACTED_HEADERS else value
        for key, value in request.headers.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """One line when a request arrives and one when its response leaves.

    With ``debug_mode`` the arrival line also lists headers (credentials
    redacted), the query string and the body size.
    """

    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12])
        g.request_started = time.perf_counter()

        line = f"-> {request.method} {request.full_path.rstrip('?')} ip={_client_ip()}"
        if debug_mode:
            line += (
                f" origin={request.headers.get('Origin')} headers={_visible_headers()}"
                f" body_size={request.content_length or 0}"
            )
        logger.info(line)

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        response.headers[REQUEST_ID_HEADER] = get_correlation_id()
        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"<- {request.method} {request.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
