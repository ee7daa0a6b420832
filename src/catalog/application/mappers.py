"""Translation between DTOs and single domain entities.

One pair of functions per entity. The DTO -> domain direction checks
that the DTO and its required fields are present and leaves every other
rule to the value objects. A blank id means the entity is new.
"""

from __future__ import annotations

from catalog.application.dto import CategoryDTO, ProductDTO, StockDTO
from catalog.application.exceptions import InvalidInputError
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId, ProductId, StockId
from catalog.domain.model.product import Product
from catalog.domain.model.stock import Stock
from catalog.domain.model.text import is_blank
from catalog.domain.model.value_objects import (
    CategoryName,
    ProductName,
    ProductPrice,
    StockQuantity,
)


# ── Category ─────────────────────────────────────────────────────────────────


def category_to_domain(dto: CategoryDTO | None) -> Category:
    if dto is None:
        raise InvalidInputError("CategoryDTO is required")
    if is_blank(dto.name):
        raise InvalidInputError("Category name is required")

    name = CategoryName.of(dto.name)
    if is_blank(dto.id):
        return Category.create_new(name)
    return Category.restore(CategoryId.from_string(dto.id), name)


def category_from_domain(category: Category | None) -> CategoryDTO:
    if category is None:
        raise InvalidInputError("Category is required")
    return CategoryDTO(id=category.id.value, name=category.name.value)


# ── Product (skeleton) ───────────────────────────────────────────────────────


def product_to_domain(dto: ProductDTO | None) -> Product:
    """Build a product skeleton: id, name and price only."""
    if dto is None:
        raise InvalidInputError("ProductDTO is required")
    if is_blank(dto.name):
        raise InvalidInputError("Product name is required")
    if dto.price is None:
        raise InvalidInputError("Product price is required")

    product_id = (
        ProductId.create_new() if is_blank(dto.id) else ProductId.from_string(dto.id)
    )
    return Product.restore_skeleton(
        product_id, ProductName.of(dto.name), ProductPrice.of(dto.price)
    )


def product_from_domain(product: Product | None) -> ProductDTO:
    """Basic fields only; nested category and stock are left to the assembler."""
    if product is None:
        raise InvalidInputError("Product is required")
    return ProductDTO(
        id=product.id.value,
        name=product.name.value,
        price=product.price.value,
    )


# ── Stock ────────────────────────────────────────────────────────────────────


def stock_to_domain(dto: StockDTO | None) -> Stock:
    if dto is None:
        raise InvalidInputError("StockDTO is required")
    if dto.quantity is None:
        raise InvalidInputError("Stock quantity is required")

    quantity = StockQuantity.of(dto.quantity)
    if is_blank(dto.id):
        return Stock.create_new(quantity)
    return Stock.restore(StockId.from_string(dto.id), quantity)


def stock_from_domain(stock: Stock | None) -> StockDTO:
    if stock is None:
        raise InvalidInputError("Stock is required")
    return StockDTO(id=stock.id.value, quantity=stock.quantity.value)
