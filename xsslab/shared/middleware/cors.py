# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from flask import Flask, Response, request

WILDCARD = "*"
ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization, Cookie"
PREFLIGHT_MAX_AGE = 86400


@dataclass(slots=True, frozen=True)
class CorsDecision:
    origin: str
    allow_credentials: bool
    # The echoed value depends on the request's Origin header.
    varies: bool = False


def parse_origins(configured: str | Iterable[str]) -> list[str]:
    """Split a comma-separated allow-list, keeping first-seen order and dropping duplicates."""
    items = configured.split(",") if isinstance(configured, str) else configured
    origins: list[str] = []
    for item in items:
        origin = item.strip()
        if origin and origin not in origins:
            origins.append(origin)
    return origins


def resolve_cors(request_origin: str | None, configured: str | Iterable[str]) -> CorsDecision:
    origins = parse_origins(configured)
    wildcard = WILDCARD in origins
    explicit = [o for o in origins if o != WILDCARD]

    if wildcard and not explicit:
        return CorsDecision(origin=WILDCARD, allow_credentials=False)

    if wildcard:
        # Wildcard mixed with explicit entries: any caller is trusted with credentials.
        if request_origin:
            return CorsDecision(origin=request_origin, allow_credentials=True, varies=True)
        return CorsDecision(origin=explicit[0], allow_credentials=True, varies=True)

    if request_origin and request_origin in explicit:
        return CorsDecision(origin=request_origin, allow_credentials=True, varies=True)

    fallback = explicit[0] if explicit else WILDCARD
    return CorsDecision(
        origin=fallback,
        allow_credentials=fallback != WILDCARD,
        varies=len(explicit) > 1,
    )


def apply_cors_headers(response: Response, decision: CorsDecision) -> Response:
    response.headers["Access-Control-Allow-Origin"] = decision.origin
    response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
    if decision.allow_credentials:
        response.headers["Access-Control-Allow-Credentials"] = "true"
    else:
        response.headers.pop("Access-Control-Allow-Credentials", None)
    if decision.varies:
        response.vary.add("Origin")
    return response


def preflight_response(decision: CorsDecision) -> Response:
    response = Response(status=204)
    apply_cors_headers(response, decision)
    response.headers["Access-Control-Max-Age"] = str(PREFLIGHT_MAX_AGE)
    return response


def configure_cors(app: Flask, allowed_origins: str | Iterable[str]) -> None:
    origins = parse_origins(allowed_origins)

    @app.before_request
    def _answer_preflight() -> Response | None:
        if request.method != "OPTIONS":
            return None
        return preflight_response(resolve_cors(request.headers.get("Origin"), origins))

    @app.after_request
    def _stamp_cors(response: Response) -> Response:
        if request.method == "OPTIONS":
            return response
        return apply_cors_headers(response, resolve_cors(request.headers.get("Origin"), origins))


__all__ = [
    "ALLOWED_HEADERS",
    "ALLOWED_METHODS",
    "CorsDecision",
    "PREFLIGHT_MAX_AGE",
    "configure_cors",
    "parse_origins",
    "preflight_response",
    "resolve_cors",
]
