# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from authservice.application.use_cases.users.authorize_request import AuthorizeRequestUseCase
from authservice.interfaces.http.auth_guard import auth_required
from authservice.interfaces.http.dto.auth import ProtectedDataDTO


class ProtectedController:
    def __init__(self, *, authorize_use_case: AuthorizeRequestUseCase) -> None:
        self._protect = auth_required(authorize_use_case)

    def data(self) -> tuple[Response, int]:
        return jsonify(ProtectedDataDTO().model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("protected", __name__, url_prefix="/api/protected")
        bp.add_url_rule("/data", view_func=self._protect(self.data), methods=["GET"])
        return bp
