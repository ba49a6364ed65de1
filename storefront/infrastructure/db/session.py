# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.shared.config import DatabaseConfig
from storefront.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_in_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def build_engine(config: DatabaseConfig) -> Engine:
    kwargs: dict[str, object] = {"echo": config.echo, "pool_pre_ping": True}
    if _is_in_memory_sqlite(config.url):
        # One shared connection, otherwise every checkout sees an empty database.
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )
        if config.url.startswith("sqlite"):
            kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }
    return create_engine(config.url, **kwargs)


class Database:
    """Owns the engine (and therefore the connection pool) for the process."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine = build_engine(config)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )
        logger.info(f"db: engine ready for {self.engine.url.render_as_string(hide_password=True)}")

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except Exception:
            logger.warning("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("db.session: closed session")

    def init_schema(self) -> None:
        # Import registers the mapped tables on Base.metadata.
        from storefront.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
