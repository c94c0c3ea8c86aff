# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .engine import (
    FieldSpec,
    Rule,
    RuleKind,
    ValidationResult,
    custom,
    email,
    format_errors,
    max_length,
    min_length,
    pattern,
    required,
    validate,
)
from .validators import (
    validate_create_comment,
    validate_create_post,
    validate_login,
    validate_pagination,
    validate_register,
    validate_search_query,
    validate_uuid,
)

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
    "validate_create_comment",
    "validate_create_post",
    "validate_login",
    "validate_pagination",
    "validate_register",
    "validate_search_query",
    "validate_uuid",
]
