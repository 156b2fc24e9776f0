# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from authservice.domain.users.entities import PublicUser, User
from authservice.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from authservice.shared.errors.base import ValidationError
from authservice.shared.logging import logger


class RegisterUserUseCase:
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

    def execute(
        self, username: str | None, email: str | None, password: str | None
    ) -> tuple[PublicUser, str]:
        fields = {"username": username, "email": email, "password": password}
        missing = sorted(
            name for name, value in fields.items() if not isinstance(value, str) or not value.strip()
        )
        if missing:
            raise ValidationError(context={"fields": missing})

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        # Uniqueness is enforced by the repository's constraint, not a pre-query.
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.id)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted.to_public(), token
