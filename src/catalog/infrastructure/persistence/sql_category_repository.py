"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

from sqlalchemy import Connection, select

from catalog.domain.exceptions import DomainException
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.infrastructure.exceptions import translate_errors
from catalog.infrastructure.persistence import tables
from catalog.infrastructure.persistence.row_mappers import category_row_to_entity
from catalog.infrastructure.persistence.rows import CategoryRow


class SqlCategoryRepository(CategoryRepository):
    """Reads ``product_category`` on the connection of the current unit of work."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        if category_id is None:
            raise DomainException("CategoryId is required")
        with translate_errors("fetching category"):
            stmt = select(tables.product_category).where(
                tables.product_category.c.category_uuid == category_id.value
            )
            row = self._connection.execute(stmt).mappings().first()
            if row is None:
                return None
            return category_row_to_entity(CategoryRow(**row))

    def find_all(self) -> list[Category]:
        with translate_errors("listing categories"):
            stmt = select(tables.product_category).order_by(
                tables.product_category.c.id.asc()
            )
            rows = self._connection.execute(stmt).mappings().all()
            return [category_row_to_entity(CategoryRow(**row)) for row in rows]
