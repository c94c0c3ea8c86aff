# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Declarative per-field validation.

A field is checked against an ordered list of rules. Every rule of every
field is evaluated and every failure is collected, so a client sees all
problems with a payload in one response.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class RuleKind(str, Enum):
    REQUIRED = "required"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    EMAIL = "email"
    CUSTOM = "custom"


@dataclass(slots=True, frozen=True)
class Rule:
    kind: RuleKind
    value: Any = None
    message: str | None = None
    predicate: Callable[[Any], bool] | None = None


@dataclass(slots=True, frozen=True)
class FieldSpec:
    name: str
    value: Any
    rules: Sequence[Rule] = ()


@dataclass(slots=True, frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


def required(message: str | None = None) -> Rule:
    return Rule(RuleKind.REQUIRED, message=message)


def min_length(length: int, message: str | None = None) -> Rule:
    return Rule(RuleKind.MIN_LENGTH, value=length, message=message)


def max_length(length: int, message: str | None = None) -> Rule:
    return Rule(RuleKind.MAX_LENGTH, value=length, message=message)


def pattern(regex: str | re.Pattern[str], message: str | None = None) -> Rule:
    return Rule(RuleKind.PATTERN, value=re.compile(regex), message=message)


def email(message: str | None = None) -> Rule:
    return Rule(RuleKind.EMAIL, message=message)


def custom(predicate: Callable[[Any], bool], message: str | None = None) -> Rule:
    return Rule(RuleKind.CUSTOM, predicate=predicate, message=message)


def _check(rule: Rule, name: str, value: Any) -> str | None:
    """Return the error message for a failed rule, or ``None`` when it passes."""
    kind = rule.kind

    if kind is RuleKind.REQUIRED:
        if value is None or value == "":
            return rule.message or f"{name} is required"
        return None

    # The remaining built-in rules only constrain strings.
    if kind is RuleKind.MIN_LENGTH:
        if isinstance(value, str) and len(value) < (rule.value or 0):
            return rule.message or f"{name} must be at least {rule.value} characters"
        return None

    if kind is RuleKind.MAX_LENGTH:
        if isinstance(value, str) and len(value) > (rule.value or 0):
            return rule.message or f"{name} must be at most {rule.value} characters"
        return None

    if kind is RuleKind.EMAIL:
        if isinstance(value, str) and not _EMAIL_RE.match(value):
            return rule.message or f"{name} must be a valid email"
        return None

    if kind is RuleKind.PATTERN:
        if isinstance(value, str) and rule.value is not None and not rule.value.search(value):
            return rule.message or f"{name} format is invalid"
        return None

    if kind is RuleKind.CUSTOM:
        if rule.predicate is not None and not rule.predicate(value):
            return rule.message or f"{name} validation failed"
        return None

    raise ValueError(f"unknown rule kind: {kind!r}")


def validate_field(spec: FieldSpec) -> list[str]:
    errors: list[str] = []
    for rule in spec.rules:
        message = _check(rule, spec.name, spec.value)
        if message is not None:
            errors.append(message)
    return errors


def validate(fields: Iterable[FieldSpec]) -> ValidationResult:
    errors: list[str] = []
    for spec in fields:
        errors.extend(validate_field(spec))
    return ValidationResult(valid=not errors, errors=errors)


def format_errors(result: ValidationResult) -> str:
    return "; ".join(result.errors)


__all__ = [
    "FieldSpec",
    "Rule",
    "RuleKind",
    "ValidationResult",
    "custom",
    "email",
    "format_errors",
    "max_length",
    "min_length",
    "pattern",
    "required",
    "validate",
    "validate_field",
]
