"""Composes the Product aggregate from its DTOs and back.

The per-entity mappers each handle one flat DTO; the assembler combines
them so a nested ``ProductDTO`` maps to a complete ``Product``.
"""

from __future__ import annotations

from catalog.application import mappers
from catalog.application.dto import CategoryDTO, ProductDTO
from catalog.application.exceptions import InvalidInputError
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product


def assemble_domain(dto: ProductDTO | None) -> Product:
    """Build a complete Product from a DTO carrying category and stock."""
    if dto is None:
        raise InvalidInputError("ProductDTO is required")
    if dto.category is None:
        raise InvalidInputError("CategoryDTO is required")
    if dto.stock is None:
        raise InvalidInputError("StockDTO is required")

    skeleton = mappers.product_to_domain(dto)
    category = mappers.category_to_domain(dto.category)
    stock = mappers.stock_to_domain(dto.stock)

    return Product.restore(
        skeleton.id, skeleton.name, skeleton.price, category, stock
    )


def assemble_dto(product: Product | None) -> ProductDTO:
    """Flatten a Product; nested DTOs are present only if attached."""
    if product is None:
        raise InvalidInputError("Product is required")

    dto = mappers.product_from_domain(product)
    if product.category is not None:
        dto.category = mappers.category_from_domain(product.category)
    if product.stock is not None:
        dto.stock = mappers.stock_from_domain(product.stock)
    return dto


def to_category_dto(category: Category | None) -> CategoryDTO:
    return mappers.category_from_domain(category)
