# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from xsslab.shared.logging import logger

from .base import AppError, EndpointNotFoundError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def failure_message(message: str) -> Callable:
    """Turn unexpected handler exceptions into a 500 envelope carrying ``message``."""

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return f(*args, **kwargs)
            except (AppError, HTTPException):
                raise
            except Exception as exc:
                logger.exception(f"{message}: {type(exc).__name__} on {request.method} {request.path}")
                return handle_app_error(
                    AppError(
                        message=message,
                        status=HTTPStatus.INTERNAL_SERVER_ERROR,
                        error=str(exc) or type(exc).__name__,
                    )
                )

        return wrapper

    return decorator


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.message} on {request.method} {request.path}: {exc.error}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        # Unknown paths and known paths with an unrouted method are both "not found".
        if isinstance(exc, (NotFound, MethodNotAllowed)):
            return handle_app_error(EndpointNotFoundError())
        status = HTTPStatus(exc.code or HTTPStatus.BAD_REQUEST)
        return handle_app_error(AppError(message=exc.description or status.phrase, status=status))

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = (
            request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
            if request.headers.get("X-Forwarded-For")
            else (request.remote_addr or "unknown")
        )

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return handle_app_error(
            AppError(
                message="Internal server error",
                status=default_status,
                error=str(exc) or type(exc).__name__,
            )
        )


__all__ = ["failure_message", "handle_app_error", "register_error_handler"]
