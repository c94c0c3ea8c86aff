# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_MASK = "***"

# (pattern, replacement). Order matters: full JWTs are masked before the
# key=value rules get a chance to cut them in half.
_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\beyJ[\w-]+\.[\w-]+\.[\w-]+"), "***JWT***"),
    (re.compile(r"(bearer\s+)\S+", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(auth_token=)[^;\s]+"), rf"\1{_MASK}"),
    (re.compile(r"((?:jwt_)?secret\s*[:=]\s*['\"]?)[^\s'\",]+", re.IGNORECASE), rf"\1{_MASK}"),
    # Both "password=..." and JSON-ish "'password': '...'" shapes.
    (
        re.compile(r"(['\"]?password['\"]?\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE),
        rf"\1{_MASK}",
    ),
    (re.compile(r"((?:postgres(?:ql)?|mysql|mariadb)(?:\+\w+)?://[^:/@]+:)[^@]+@"), rf"\1{_MASK}@"),
    (re.compile(r"((?:authorization|cookie)\s*:\s*)[^\n]+", re.IGNORECASE), rf"\1{_MASK}"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: scrub the message in place and always keep the record."""
    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
