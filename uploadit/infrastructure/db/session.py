# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from uploadit.shared.config import load_config
from uploadit.shared.logging import logger

_config = load_config()
_IS_SQLITE = _config.database.url.startswith("sqlite")


class Base(DeclarativeBase):
    pass


connect_args: dict[str, object] = {}
if _IS_SQLITE:
    connect_args = {
        "check_same_thread": False,
        "timeout": int(_config.database.pool_timeout),
    }

ENGINE: Engine = create_engine(
    _config.database.url,
    echo=False,
    future=True,
    pool_pre_ping=True,
    pool_size=_config.database.pool_size,
    max_overflow=_config.database.max_overflow,
    pool_timeout=_config.database.pool_timeout,
    connect_args=connect_args,
)


@event.listens_for(ENGINE, "connect")
def _set_sqlite_pragmas(dbapi_conn, _):
    if not _IS_SQLITE:
        return
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except Exception:
        logger.debug("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db() -> None:
    from . import models  # noqa: F401  (registers tables on Base.metadata)

    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")
