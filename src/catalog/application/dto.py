"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals. Ids are canonical UUID strings;
a missing id means "not created yet".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CategoryDTO:
    id: str | None
    name: str | None


@dataclass
class StockDTO:
    id: str | None
    quantity: int | None


@dataclass
class ProductDTO:
    """A product with its nested category and stock."""

    id: str | None
    name: str | None
    price: int | None
    category: CategoryDTO | None = None
    stock: StockDTO | None = None
