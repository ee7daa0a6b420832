"""Engine construction and schema management."""

from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from catalog.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)


def init_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the process-wide engine (and its connection pool).

    An in-memory SQLite database lives inside a single connection, so
    that case is pinned to one shared connection.
    """
    url = make_url(database_url)
    logger.info("Initializing database engine for %s", url.render_as_string(hide_password=True))

    if url.get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def create_tables(engine: Engine) -> None:
    logger.info("Creating database tables")
    metadata.create_all(engine)
    logger.info("Database tables created")


def drop_tables(engine: Engine) -> None:
    logger.info("Dropping database tables")
    metadata.drop_all(engine)
