# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.interfaces.http.dto.auth import (LoginRequestDTO, LoginSuccessDTO,
                                                 SignupRequestDTO, SignupSuccessDTO)
from storefront.shared.config import SecurityConfig
from storefront.shared.errors.validation import raise_validation_error
from storefront.shared.middleware.rate_limit import rate_limit


def _json_body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


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

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        self._register_use_case.execute(dto.username, dto.email, dto.password)

        return jsonify(SignupSuccessDTO().model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        issued = self._login_use_case.execute(dto.email, dto.password)

        payload = LoginSuccessDTO(
            token=issued.token, expires_at=int(issued.expires_at.timestamp())
        ).model_dump(by_alias=True)
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        limited = rate_limit(self._security)
        bp.add_url_rule("/signup", view_func=limited(self.signup), methods=["POST"])
        bp.add_url_rule("/login", view_func=limited(self.login), methods=["POST"])
        return bp
