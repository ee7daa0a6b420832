"""SQLAlchemy-backed unit of work.

One connection and one transaction per unit. Connections come from the
engine's pool, which is the only state shared between requests.
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine, RootTransaction

from catalog.application.unit_of_work import UnitOfWork
from catalog.infrastructure.exceptions import translate_errors
from catalog.infrastructure.persistence.sql_category_repository import (
    SqlCategoryRepository,
)
from catalog.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


class SqlUnitOfWork(UnitOfWork):

    def __init__(self, engine: Engine, read_only: bool = False) -> None:
        super().__init__(read_only=read_only)
        self._engine = engine
        self._connection: Connection | None = None
        self._transaction: RootTransaction | None = None

    def _begin(self) -> None:
        with translate_errors("opening a transaction"):
            self._connection = self._engine.connect()
            try:
                self._transaction = self._connection.begin()
                if self.read_only and self._engine.dialect.name == "postgresql":
                    self._connection.execute(text("SET TRANSACTION READ ONLY"))
            except BaseException:
                self._connection.close()
                self._connection = None
                raise
        self.categories = SqlCategoryRepository(self._connection)
        self.products = SqlProductRepository(self._connection)

    def _commit(self) -> None:
        with translate_errors("committing"):
            self._transaction.commit()

    def _rollback(self) -> None:
        with translate_errors("rolling back"):
            self._transaction.rollback()

    def _close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            self._transaction = None
