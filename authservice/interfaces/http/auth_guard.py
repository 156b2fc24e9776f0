# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from authservice.application.use_cases.users.authorize_request import AuthorizeRequestUseCase
from authservice.domain.users.exceptions import AuthorizationError
from authservice.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def auth_required(authorize: AuthorizeRequestUseCase) -> Callable[[F], F]:
    """Build a view decorator that rejects requests without a valid bearer token.

    On success the authenticated id is stored on ``flask.g.user_id`` before the
    wrapped view runs. Failures raise ``AuthorizationError`` and are rendered
    as 401 by the error handler.

    Usage:
        protect = auth_required(container.authorize_request_use_case)

        @protect
        def view(): ...
    """

    def decorator(f: F) -> F:
        @wraps(f)
        def inner(*a: Any, **kw: Any) -> Any:
            try:
                claims = authorize.execute(request.headers.get("Authorization"))
            except AuthorizationError as exc:
                logger.warning(
                    f"Auth failed ({exc.code}) on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise
            g.user_id = claims.user_id
            logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return cast(F, inner)

    return decorator
