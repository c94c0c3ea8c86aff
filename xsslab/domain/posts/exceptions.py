# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from xsslab.shared.errors.base import DomainError


class PostNotFoundError(DomainError):
    default_message = "Post not found"
    default_status = HTTPStatus.NOT_FOUND
