"""Password hashing strategies."""

from __future__ import annotations

import argon2
from argon2 import exceptions as argon2_exceptions

from authservice.domain.users.exceptions import HashingError
from authservice.domain.users.repositories import PasswordHasher
from authservice.shared.config import HashingConfig


class Argon2PasswordHasher(PasswordHasher):
    """Argon2id hasher; salt and cost parameters travel inside the encoded hash."""

    def __init__(self, config: HashingConfig | None = None) -> None:
        config = config or HashingConfig()  # type: ignore[call-arg]
        self._hasher = argon2.PasswordHasher(
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
            hash_len=config.hash_len,
            salt_len=config.salt_len,
            type=argon2.Type.ID,
        )

    def hash(self, password: str) -> str:
        try:
            return self._hasher.hash(password)
        except argon2_exceptions.HashingError as exc:
            raise HashingError(context={"reason": type(exc).__name__}) from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._hasher.verify(hashed, password)
        except argon2_exceptions.VerifyMismatchError:
            return False
        except (argon2_exceptions.InvalidHashError, argon2_exceptions.VerificationError) as exc:
            raise HashingError(context={"reason": type(exc).__name__}) from exc
