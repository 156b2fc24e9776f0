# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from authservice.domain.users.entities import User as DomainUser
from authservice.domain.users.exceptions import UserAlreadyExistsError
from authservice.domain.users.repositories import UserRepository
from authservice.infrastructure.db.models import User
from authservice.infrastructure.db.session import Database


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_username(self, username: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        # username is the only unique column besides the primary key
        try:
            with self._db.session_scope() as session:
                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError(context={"username": user.username}) from exc
