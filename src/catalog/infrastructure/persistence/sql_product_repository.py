"""SQLAlchemy implementation of ProductRepository.

A product is stored in two tables (``product`` and ``product_stock``)
and refers to a third (``product_category``) through an integer key.
Reads join all three and hand the pieces to the row assembler.
"""

from __future__ import annotations

from sqlalchemy import Connection, Table, exists, select
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql.elements import ColumnElement

from catalog.application.exceptions import ExistsError
from catalog.domain.exceptions import DomainException
from catalog.domain.model.identifiers import ProductId
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductName
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.exceptions import translate_errors
from catalog.infrastructure.persistence import product_assembler, tables
from catalog.infrastructure.persistence.rows import (
    CategoryRow,
    ProductRow,
    StockRow,
    insert_values,
)

# Column label prefixes used to split the joined row back into its tables
_PRODUCT = "p"
_STOCK = "s"
_CATEGORY = "c"


def _labeled(table: Table, prefix: str) -> list[ColumnElement]:
    return [column.label(f"{prefix}__{column.name}") for column in table.columns]


def _extract(row: RowMapping, table: Table, prefix: str) -> dict:
    return {column.name: row[f"{prefix}__{column.name}"] for column in table.columns}


def _is_duplicate_name(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return "uq_product_name" in message or "product.name" in message


class SqlProductRepository(ProductRepository):

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> None:
        if product is None:
            raise DomainException("Product is required")
        product.ensure_complete()

        with translate_errors("registering product"):
            category_uuid = product_assembler.extract_category_uuid(product)
            category_pk = self._connection.execute(
                select(tables.product_category.c.id).where(
                    tables.product_category.c.category_uuid == category_uuid
                )
            ).scalar_one_or_none()
            if category_pk is None:
                raise DomainException(
                    f"Category does not exist: {category_uuid}"
                )

            product_row = product_assembler.to_product_row(product)
            product_row.category_id = category_pk
            try:
                result = self._connection.execute(
                    tables.product.insert().values(**insert_values(product_row))
                )
            except IntegrityError as exc:
                if _is_duplicate_name(exc):
                    raise ExistsError(
                        f"Product name:[{product.name.value}] is already registered"
                    ) from exc
                raise
            product_pk = result.inserted_primary_key[0]

            stock_row = product_assembler.to_stock_row(product)
            stock_row.product_id = product_pk
            self._connection.execute(
                tables.product_stock.insert().values(**insert_values(stock_row))
            )

    def exists_by_name(self, name: ProductName) -> bool:
        if name is None:
            raise DomainException("Product name is required")
        with translate_errors("checking product name"):
            stmt = select(exists().where(tables.product.c.name == name.value))
            return bool(self._connection.execute(stmt).scalar())

    def find_by_id(self, product_id: ProductId) -> Product | None:
        if product_id is None:
            raise DomainException("ProductId is required")
        with translate_errors("fetching product by id"):
            return self._find_one(tables.product.c.product_uuid == product_id.value)

    def find_by_name(self, name: ProductName) -> Product | None:
        if name is None:
            raise DomainException("Product name is required")
        with translate_errors("searching product by name"):
            return self._find_one(tables.product.c.name == name.value)

    # --- Query helpers --------------------------------------------------------

    def _find_one(self, condition: ColumnElement[bool]) -> Product | None:
        p, s, c = tables.product, tables.product_stock, tables.product_category
        stmt = (
            select(*_labeled(p, _PRODUCT), *_labeled(s, _STOCK), *_labeled(c, _CATEGORY))
            .select_from(p)
            .join(s, p.c.id == s.c.product_id)
            .join(c, p.c.category_id == c.c.id)
            .where(condition)
        )
        row = self._connection.execute(stmt).mappings().first()
        if row is None:
            return None
        return product_assembler.assemble(
            ProductRow(**_extract(row, p, _PRODUCT)),
            CategoryRow(**_extract(row, c, _CATEGORY)),
            StockRow(**_extract(row, s, _STOCK)),
        )
