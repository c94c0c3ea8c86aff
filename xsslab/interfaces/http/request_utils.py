# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any, NoReturn, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from xsslab.shared.errors import RequestValidationError
from xsslab.shared.validation import ValidationResult, format_errors

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
DTO = TypeVar("DTO", bound=BaseModel)


def json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def parse_int(raw: str | None, default: int) -> int:
    """Leading-integer parse: ``"10abc"`` is 10, anything without digits is ``default``."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1))


def pagination_args() -> tuple[int, int]:
    # No upper bound on limit; callers get whatever they ask for.
    limit = parse_int(request.args.get("limit"), DEFAULT_LIMIT)
    offset = parse_int(request.args.get("offset"), DEFAULT_OFFSET)
    return limit, offset


def ensure_valid(result: ValidationResult) -> None:
    if not result.valid:
        raise RequestValidationError(format_errors(result), errors=result.errors)


def _type_error_message(error: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()) if part is not None) or "body"
    if error.get("type") == "string_type":
        return f"{field} must be a string"
    return f"{field}: {error.get('msg', 'invalid value')}"


def raise_validation_error(exc: ValidationError) -> NoReturn:
    messages = [_type_error_message(error) for error in exc.errors()]
    raise RequestValidationError("; ".join(messages), errors=messages) from exc


def parse_body(dto_cls: type[DTO], body: dict[str, Any]) -> DTO:
    """Strictly typed view of a body that already passed the rule validators."""
    try:
        return dto_cls.model_validate(body)
    except ValidationError as exc:
        raise_validation_error(exc)


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "ensure_valid",
    "json_body",
    "pagination_args",
    "parse_body",
    "parse_int",
    "raise_validation_error",
]
