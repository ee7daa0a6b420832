"""Row <-> entity translation for the three catalog tables.

Reading a row validates it exactly like user input: the value objects
reject anything out of range. Writing a row fills only the external
columns; surrogate keys and foreign keys are the repository's business.
"""

from __future__ import annotations

from catalog.domain.exceptions import DomainException
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId, ProductId, StockId
from catalog.domain.model.product import Product
from catalog.domain.model.stock import Stock
from catalog.domain.model.value_objects import (
    CategoryName,
    ProductName,
    ProductPrice,
    StockQuantity,
)
from catalog.infrastructure.persistence.rows import CategoryRow, ProductRow, StockRow


def _require(value: object, table: str, column: str) -> None:
    if value is None:
        raise DomainException(f"{table}.{column} is missing")


# ── product_category ─────────────────────────────────────────────────────────


def category_row_to_entity(row: CategoryRow | None) -> Category:
    if row is None:
        raise DomainException("product_category row is required")
    _require(row.category_uuid, "product_category", "category_uuid")
    _require(row.name, "product_category", "name")
    return Category.restore(
        CategoryId.from_string(row.category_uuid), CategoryName.of(row.name)
    )


def category_entity_to_row(category: Category | None) -> CategoryRow:
    if category is None:
        raise DomainException("Category is required")
    return CategoryRow(category_uuid=category.id.value, name=category.name.value)


# ── product ──────────────────────────────────────────────────────────────────


def product_row_to_entity(row: ProductRow | None) -> Product:
    """A single product row only yields a skeleton."""
    if row is None:
        raise DomainException("product row is required")
    _require(row.product_uuid, "product", "product_uuid")
    _require(row.name, "product", "name")
    _require(row.price, "product", "price")
    return Product.restore_skeleton(
        ProductId.from_string(row.product_uuid),
        ProductName.of(row.name),
        ProductPrice.of(row.price),
    )


def product_entity_to_row(product: Product | None) -> ProductRow:
    if product is None:
        raise DomainException("Product is required")
    return ProductRow(
        product_uuid=product.id.value,
        name=product.name.value,
        price=product.price.value,
    )


# ── product_stock ────────────────────────────────────────────────────────────


def stock_row_to_entity(row: StockRow | None) -> Stock:
    if row is None:
        raise DomainException("product_stock row is required")
    _require(row.stock_uuid, "product_stock", "stock_uuid")
    _require(row.stock, "product_stock", "stock")
    return Stock.restore(
        StockId.from_string(row.stock_uuid), StockQuantity.of(row.stock)
    )


def stock_entity_to_row(stock: Stock | None) -> StockRow:
    if stock is None:
        raise DomainException("Stock is required")
    return StockRow(stock_uuid=stock.id.value, stock=stock.quantity.value)
