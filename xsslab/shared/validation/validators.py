# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from .engine import (
    FieldSpec,
    ValidationResult,
    max_length,
    min_length,
    pattern,
    required,
    validate,
)

USERNAME_PATTERN = r"^[a-zA-Z0-9_-]+$"
UUID_PATTERN = r"(?i)^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
MAX_PAGE_LIMIT = 100


def validate_register(data: dict[str, Any]) -> ValidationResult:
    return validate(
        [
            FieldSpec(
                "username",
                data.get("username"),
                [
                    required("Username is required"),
                    min_length(3, "Username must be at least 3 characters"),
                    max_length(50, "Username must be at most 50 characters"),
                    pattern(
                        USERNAME_PATTERN,
                        "Username can only contain letters, numbers, underscores and hyphens",
                    ),
                ],
            ),
            FieldSpec(
                "password",
                data.get("password"),
                [
                    required("Password is required"),
                    min_length(6, "Password must be at least 6 characters"),
                    max_length(100, "Password must be at most 100 characters"),
                ],
            ),
            FieldSpec(
                "name",
                data.get("name"),
                [
                    required("Name is required"),
                    min_length(1, "Name cannot be empty"),
                    max_length(100, "Name must be at most 100 characters"),
                ],
            ),
        ]
    )


def validate_login(data: dict[str, Any]) -> ValidationResult:
    return validate(
        [
            FieldSpec("username", data.get("username"), [required("Username is required")]),
            FieldSpec("password", data.get("password"), [required("Password is required")]),
        ]
    )


def validate_create_post(data: dict[str, Any]) -> ValidationResult:
    return validate(
        [
            FieldSpec(
                "title",
                data.get("title"),
                [
                    required("Title is required"),
                    min_length(1, "Title cannot be empty"),
                    max_length(200, "Title must be at most 200 characters"),
                ],
            ),
            FieldSpec(
                "content",
                data.get("content"),
                [
                    required("Content is required"),
                    min_length(1, "Content cannot be empty"),
                    max_length(10000, "Content must be at most 10000 characters"),
                ],
            ),
        ]
    )


def validate_create_comment(data: dict[str, Any]) -> ValidationResult:
    return validate(
        [
            FieldSpec(
                "content",
                data.get("content"),
                [
                    required("Content is required"),
                    min_length(1, "Content cannot be empty"),
                    max_length(1000, "Content must be at most 1000 characters"),
                ],
            ),
            FieldSpec("post_uuid", data.get("post_uuid"), [required("Post UUID is required")]),
        ]
    )


def validate_search_query(query: str | None) -> ValidationResult:
    return validate(
        [
            FieldSpec(
                "search query",
                query,
                [
                    required("Search query is required"),
                    min_length(1, "Search query cannot be empty"),
                    max_length(100, "Search query must be at most 100 characters"),
                ],
            )
        ]
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_pagination(limit: Any = None, offset: Any = None) -> ValidationResult:
    errors: list[str] = []

    if limit is not None:
        if not _is_number(limit) or limit < 1:
            errors.append("Limit must be a positive number")
        elif limit > MAX_PAGE_LIMIT:
            errors.append(f"Limit must be at most {MAX_PAGE_LIMIT}")

    if offset is not None:
        if not _is_number(offset) or offset < 0:
            errors.append("Offset must be a non-negative number")

    return ValidationResult(valid=not errors, errors=errors)


def validate_uuid(value: str | None) -> ValidationResult:
    return validate(
        [
            FieldSpec(
                "UUID",
                value,
                [required("UUID is required"), pattern(UUID_PATTERN, "Invalid UUID format")],
            )
        ]
    )


__all__ = [
    "MAX_PAGE_LIMIT",
    "USERNAME_PATTERN",
    "UUID_PATTERN",
    "validate_create_comment",
    "validate_create_post",
    "validate_login",
    "validate_pagination",
    "validate_register",
    "validate_search_query",
    "validate_uuid",
]
