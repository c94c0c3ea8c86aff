# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from xsslab.shared.errors.base import DomainError


class UsernameTakenError(DomainError):
    default_message = "Username already exists"
    default_status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    default_message = "Invalid username or password"
    default_status = HTTPStatus.UNAUTHORIZED
