# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from authservice.shared.config import DatabaseConfig
from authservice.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _engine_kwargs(config: DatabaseConfig) -> dict[str, Any]:
    url = make_url(config.url)
    if url.get_backend_name() == "sqlite":
        kwargs: dict[str, Any] = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }
        }
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_pre_ping": True,
        "pool_size": config.pool_size,
        "max_overflow": config.max_overflow,
        "pool_timeout": config.pool_timeout,
    }


class Database:
    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = create_engine(
            config.url, echo=False, hide_parameters=True, **_engine_kwargs(config)
        )
        self._sessions = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._sessions()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except IntegrityError as exc:
            logger.warning(f"db.session: constraint violation ({type(exc.orig).__name__}), rolling back")
            session.rollback()
            raise
        except Exception:
            logger.exception("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("db.session: closed session")

    def init_db(self) -> None:
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")
