# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authservice.domain.users.entities import TokenClaims
from authservice.domain.users.exceptions import (
    MalformedAuthorizationError,
    MissingAuthorizationError,
)
from authservice.domain.users.repositories import TokenService


class AuthorizeRequestUseCase:
    """Binary authorization decision for a raw ``Authorization`` header value.

    Everything after the first space is the token candidate. The scheme word
    in front of it is not checked, so ``Token abc`` and ``Bearer abc`` are
    treated alike.
    """

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, authorization: str | None) -> TokenClaims:
        if not authorization:
            raise MissingAuthorizationError()

        _scheme, _, candidate = authorization.partition(" ")
        if not candidate:
            raise MalformedAuthorizationError()

        return self._tokens.verify(candidate)
