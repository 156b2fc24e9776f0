# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from authservice.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


DuplicateUserError = UserAlreadyExistsError


class AuthenticationError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.BAD_REQUEST


class InvalidUsernameError(AuthenticationError):
    code = "invalid_username"
    message = "Invalid username"


class IncorrectPasswordError(AuthenticationError):
    code = "incorrect_password"
    message = "Incorrect password"


class AuthorizationError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED

    def to_dict(self) -> dict[str, str]:
        return {"error": "unauthorized"}


class MissingAuthorizationError(AuthorizationError):
    code = "authorization_missing"


class MalformedAuthorizationError(AuthorizationError):
    code = "authorization_malformed"


class InvalidTokenError(AuthorizationError):
    code = "invalid_token"


class HashingError(DomainError):
    code = "hashing_failed"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
