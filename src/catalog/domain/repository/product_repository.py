"""Abstract repository for the Product aggregate.

Implementations persist and rebuild the whole aggregate: the product
itself, its stock and the reference to its category.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.identifiers import ProductId
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductName


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> None:
        """Persist a new, complete product together with its stock.

        Raises DomainException if the product is a skeleton or its
        category does not exist.
        """

    @abstractmethod
    def exists_by_name(self, name: ProductName) -> bool:
        """Return True if a product with exactly this name exists."""

    @abstractmethod
    def find_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product by its id, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: ProductName) -> Product | None:
        """Return a product by its exact name, or None if not found."""
