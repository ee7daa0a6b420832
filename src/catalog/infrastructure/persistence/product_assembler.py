"""Builds the Product aggregate from its three rows, and splits it back."""

from __future__ import annotations

from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure.persistence import row_mappers
from catalog.infrastructure.persistence.rows import CategoryRow, ProductRow, StockRow


def assemble(
    product_row: ProductRow | None,
    category_row: CategoryRow | None,
    stock_row: StockRow | None,
) -> Product:
    """Rebuild a complete Product.

    The category row is the one the product's ``category_id`` points at
    and the stock row the one whose ``product_id`` points at the product.
    """
    if product_row is None:
        raise DomainException("product row is required")
    if category_row is None:
        raise DomainException("product_category row is required")
    if stock_row is None:
        raise DomainException("product_stock row is required")

    skeleton = row_mappers.product_row_to_entity(product_row)
    category = row_mappers.category_row_to_entity(category_row)
    stock = row_mappers.stock_row_to_entity(stock_row)

    return Product.restore(
        skeleton.id, skeleton.name, skeleton.price, category, stock
    )


def extract_category_uuid(product: Product) -> str:
    """Canonical UUID of the attached category, used to resolve the FK."""
    if product is None or product.category is None:
        raise DomainException("Product category is required")
    return product.category.id.value


def to_product_row(product: Product) -> ProductRow:
    return row_mappers.product_entity_to_row(product)


def to_stock_row(product: Product) -> StockRow:
    if product is None or product.stock is None:
        raise DomainException("Product stock is required")
    return row_mappers.stock_entity_to_row(product.stock)
