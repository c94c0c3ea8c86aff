# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from xsslab.application.use_cases.users.login_user import LoginUserUseCase
from xsslab.application.use_cases.users.register_user import RegisterUserUseCase
from xsslab.domain.users.exceptions import InvalidCredentialsError
from xsslab.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    MessageDTO,
    RegisterRequestDTO,
    UserDTO,
)
from xsslab.interfaces.http.request_utils import ensure_valid, json_body, parse_body
from xsslab.shared.config import SecurityConfig
from xsslab.shared.errors import failure_message
from xsslab.shared.logging import logger
from xsslab.shared.middleware.session import AUTH_COOKIE
from xsslab.shared.validation import validate_login, validate_register


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._security = security

    def _set_token_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            AUTH_COOKIE,
            token,
            max_age=self._security.token_lifetime,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )

    def _clear_token_cookie(self, response: Response) -> None:
        # Attributes must match the ones used when the cookie was set.
        response.delete_cookie(
            AUTH_COOKIE,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )

    @failure_message("Registration failed")
    def register(self) -> tuple[Response, int]:
        body = json_body()
        ensure_valid(validate_register(body))
        dto = parse_body(RegisterRequestDTO, body)

        user, token = self._register_use_case.execute(dto.username, dto.password, dto.name)

        payload = AuthSuccessDTO(
            user=UserDTO.model_validate(user), message="Registration successful"
        ).model_dump()
        response = jsonify(payload)
        self._set_token_cookie(response, token)
        logger.info(f"auth.register: ok user={user.uuid}")
        return response, 201

    @failure_message("Login failed")
    def login(self) -> tuple[Response, int]:
        body = json_body()
        ensure_valid(validate_login(body))
        dto = parse_body(LoginRequestDTO, body)

        try:
            user, token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            logger.warning(f"auth.login: rejected username={dto.username!r}")
            raise

        payload = AuthSuccessDTO(
            user=UserDTO.model_validate(user), message="Login successful"
        ).model_dump()
        response = jsonify(payload)
        self._set_token_cookie(response, token)
        logger.info(f"auth.login: ok user={user.uuid}")
        return response, 200

    @failure_message("Logout failed")
    def logout(self) -> tuple[Response, int]:
        response = jsonify(MessageDTO(message="Logout successful").model_dump())
        self._clear_token_cookie(response)
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
