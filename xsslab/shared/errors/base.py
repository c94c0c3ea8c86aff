# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    message: str
    status: HTTPStatus
    error: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        status: HTTPStatus | None = None,
        error: str | None = None,
    ) -> None:
        resolved_message = message or cast(str, getattr(type(self), "default_message", "Bad request"))
        resolved_status = status or cast(
            HTTPStatus, getattr(type(self), "default_status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(message=resolved_message, status=resolved_status, error=error)


class InfrastructureError(AppError):
    def __init__(
        self,
        message: str = "Internal server error",
        *,
        status: HTTPStatus | None = None,
        error: str | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(message=message, status=resolved_status, error=error)


class ServiceUnavailableError(InfrastructureError):
    def __init__(self, message: str, *, error: str | None = None) -> None:
        super().__init__(message, status=HTTPStatus.SERVICE_UNAVAILABLE, error=error)


class RequestValidationError(AppError):
    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message=message, status=HTTPStatus.BAD_REQUEST)
        self.errors = list(errors or [])


class AuthenticationRequiredError(AppError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message=message, status=HTTPStatus.UNAUTHORIZED)


class EndpointNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(message="Endpoint not found", status=HTTPStatus.NOT_FOUND)
