"""Composition root: wires concrete implementations to application interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache, partial

from sqlalchemy.engine import Engine

from catalog.application.unit_of_work import UnitOfWorkFactory
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.persistence.database import init_engine
from catalog.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork


@lru_cache
def engine() -> Engine:
    settings = get_settings()
    return init_engine(settings.database_url, echo=settings.db_echo)


def unit_of_work_factory(bound_engine: Engine | None = None) -> UnitOfWorkFactory:
    return partial(SqlUnitOfWork, bound_engine or engine())
