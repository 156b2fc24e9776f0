# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authservice.domain.users.entities import PublicUser
from authservice.domain.users.exceptions import IncorrectPasswordError, InvalidUsernameError
from authservice.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from authservice.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[PublicUser, str]:
        user = self._users.find_by_username(username)
        if user is None:
            logger.info("auth.login: rejected, unknown username")
            raise InvalidUsernameError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: rejected, bad password for user_id={user.id}")
            raise IncorrectPasswordError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user.to_public(), token
