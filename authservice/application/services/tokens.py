"""Signed bearer tokens (JWT) bound to a single user id."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from pydantic import SecretStr

from authservice.domain.users.entities import TokenClaims
from authservice.domain.users.exceptions import InvalidTokenError
from authservice.domain.users.repositories import TokenService

USER_ID_CLAIM = "userId"


class JwtTokenService(TokenService):
    """Issues and verifies HMAC-signed JWTs.

    Tokens carry ``userId`` and ``iat``. ``exp`` is only added when a ``ttl``
    is configured; without one a token stays valid until the secret changes.
    """

    def __init__(
        self,
        secret: SecretStr,
        *,
        algorithm: str = "HS256",
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, user_id: int) -> str:
        now = self._clock()
        claims: dict[str, object] = {
            USER_ID_CLAIM: user_id,
            "iat": int(now.timestamp()),
        }
        if self._ttl is not None:
            claims["exp"] = int((now + self._ttl).timestamp())
        return jwt.encode(claims, self._secret.get_secret_value(), algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        if not isinstance(token, str) or not token:
            raise InvalidTokenError(context={"reason": "empty"})
        try:
            payload = jwt.decode(
                token,
                self._secret.get_secret_value(),
                algorithms=[self._algorithm],
            )
        except JWTError as exc:
            raise InvalidTokenError(context={"reason": type(exc).__name__}) from exc

        user_id = payload.get(USER_ID_CLAIM)
        if user_id is None or isinstance(user_id, bool):
            raise InvalidTokenError(context={"reason": "missing_user_id"})
        return TokenClaims(user_id=user_id)

    def __repr__(self) -> str:
        return f"JwtTokenService(algorithm={self._algorithm!r}, ttl={self._ttl!r})"
