# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authservice.application.use_cases.users.login_user import LoginUserUseCase
from authservice.application.use_cases.users.register_user import RegisterUserUseCase
from authservice.domain.users.entities import PublicUser
from authservice.interfaces.http.dto.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from authservice.shared.errors.validation import raise_validation_error
from authservice.shared.logging import logger


def _auth_response(user: PublicUser, token: str) -> Response:
    payload = AuthResponseDTO(**user.to_dict(), token=token).model_dump()
    return jsonify(payload)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.username, dto.email, dto.password)

        logger.info(f"auth.register: responded user_id={user.id}")
        return _auth_response(user, token), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.login: responded user_id={user.id}")
        return _auth_response(user, token), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
