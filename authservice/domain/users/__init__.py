# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import PublicUser, TokenClaims, User
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateUserError,
    HashingError,
    IncorrectPasswordError,
    InvalidTokenError,
    InvalidUsernameError,
    MalformedAuthorizationError,
    MissingAuthorizationError,
    UserAlreadyExistsError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "DuplicateUserError",
    "HashingError",
    "IncorrectPasswordError",
    "InvalidTokenError",
    "InvalidUsernameError",
    "MalformedAuthorizationError",
    "MissingAuthorizationError",
    "PasswordHasher",
    "PublicUser",
    "TokenClaims",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
