# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from photoshare.shared.config import DatabaseConfig
from photoshare.shared.errors.base import StorageError
from photoshare.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(config: DatabaseConfig) -> Engine:
    kwargs: dict[str, object] = {"echo": config.echo, "future": True}
    if config.is_in_memory():
        # One shared connection, otherwise every checkout sees an empty database.
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_size"] = config.pool_size
        kwargs["max_overflow"] = config.max_overflow
        kwargs["pool_timeout"] = config.pool_timeout
        if config.is_sqlite():
            kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }

    engine = create_engine(config.url, **kwargs)
    if config.is_sqlite():
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """Engine and session factory owned by one application instance."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = create_db_engine(config)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("db.session: storage error, rolling back")
            session.rollback()
            raise StorageError() from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("db.session: closed session")

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
