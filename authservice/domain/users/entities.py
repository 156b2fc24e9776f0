# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.id, username=self.username, email=self.email)


@dataclass(slots=True, frozen=True)
class PublicUser:
    """User fields that may leave the service."""

    id: int
    username: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "email": self.email}


@dataclass(slots=True, frozen=True)
class TokenClaims:

    user_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"userId": self.user_id}
