"""Product aggregate.

The Product is the aggregate root. It owns its Stock and refers to a
Category. A fully formed product carries both; a *skeleton* carries
neither and exists only while a product is being assembled from its
parts. Holding exactly one of the two is never allowed.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import DomainException
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import ProductId
from catalog.domain.model.stock import Stock
from catalog.domain.model.value_objects import (
    ProductName,
    ProductPrice,
    StockQuantity,
)


@dataclass(eq=False)
class Product:
    """Aggregate root for the catalog.

    Use the factories rather than the constructor: ``create_new`` for a
    product that does not exist yet, ``restore`` to rebuild a persisted
    one and ``restore_skeleton`` for the transient id/name/price form.
    """

    id: ProductId
    name: ProductName
    price: ProductPrice
    category: Category | None = None
    stock: Stock | None = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise DomainException("Product id is required")
        if self.name is None:
            raise DomainException("Product name is required")
        if self.price is None:
            raise DomainException("Product price is required")
        if (self.category is None) != (self.stock is None):
            raise DomainException(
                "Product category and stock must be set together"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create_new(
        name: ProductName,
        price: ProductPrice,
        category: Category,
        initial_quantity: StockQuantity,
    ) -> Product:
        """Create a product with a fresh id and a fresh stock entry."""
        if name is None:
            raise DomainException("Product name is required")
        if price is None:
            raise DomainException("Product price is required")
        if category is None:
            raise DomainException("Product category is required")
        if initial_quantity is None:
            raise DomainException("Initial stock quantity is required")
        return Product(
            ProductId.create_new(),
            name,
            price,
            category,
            Stock.create_new(initial_quantity),
        )

    @staticmethod
    def restore(
        product_id: ProductId,
        name: ProductName,
        price: ProductPrice,
        category: Category,
        stock: Stock,
    ) -> Product:
        if category is None:
            raise DomainException("Product category is required")
        if stock is None:
            raise DomainException("Product stock is required")
        return Product(product_id, name, price, category, stock)

    @staticmethod
    def restore_skeleton(
        product_id: ProductId, name: ProductName, price: ProductPrice
    ) -> Product:
        """Rebuild only id, name and price; category and stock stay unset."""
        return Product(product_id, name, price)

    # --- Mutations ------------------------------------------------------------

    def rename(self, new_name: ProductName) -> None:
        if new_name is None:
            raise DomainException("Product name is required")
        self.name = new_name

    def reprice(self, new_price: ProductPrice) -> None:
        if new_price is None:
            raise DomainException("Product price is required")
        self.price = new_price

    def change_stock(self, new_quantity: StockQuantity) -> None:
        if self.stock is None:
            raise DomainException(
                "Product has no stock attached; call attach_stock() first"
            )
        self.stock.change_quantity(new_quantity)

    def attach_category(self, category: Category) -> None:
        if category is None:
            raise DomainException("Product category is required")
        self.category = category

    def attach_stock(self, stock: Stock) -> None:
        if stock is None:
            raise DomainException("Product stock is required")
        self.stock = stock

    # --- Queries --------------------------------------------------------------

    @property
    def is_skeleton(self) -> bool:
        return self.category is None and self.stock is None

    @property
    def current_quantity(self) -> StockQuantity | None:
        return self.stock.quantity if self.stock is not None else None

    def ensure_complete(self) -> None:
        """Raise unless both category and stock are attached."""
        if self.category is None or self.stock is None:
            raise DomainException(
                f"Product {self.id} is incomplete: category and stock are required"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
