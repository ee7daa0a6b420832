"""Stock entity, the quantity on hand for one product.

Owned by the Product aggregate. The quantity is always within
``StockQuantity.MIN`` and ``StockQuantity.MAX``; a mutation that would
leave that range fails and the entity keeps its previous quantity.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import DomainException
from catalog.domain.model.identifiers import StockId
from catalog.domain.model.value_objects import StockQuantity


def _check_delta(operation: str, amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise DomainException(
            f"Stock {operation} must be an integer, got {type(amount).__name__}"
        )
    if amount < 0:
        raise DomainException(f"Stock {operation} must not be negative: {amount}")


@dataclass(eq=False)
class Stock:

    id: StockId
    quantity: StockQuantity

    def __post_init__(self) -> None:
        if self.id is None:
            raise DomainException("Stock id is required")
        if self.quantity is None:
            raise DomainException("Stock quantity is required")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create_new(initial_quantity: StockQuantity) -> Stock:
        if initial_quantity is None:
            raise DomainException("Stock quantity is required")
        return Stock(StockId.create_new(), initial_quantity)

    @staticmethod
    def restore(stock_id: StockId, quantity: StockQuantity) -> Stock:
        return Stock(stock_id, quantity)

    # --- Mutations ------------------------------------------------------------

    def increase(self, amount: int) -> None:
        """Add *amount* units; the result is re-validated as a StockQuantity."""
        _check_delta("increase", amount)
        self.quantity = StockQuantity(self.quantity.value + amount)

    def decrease(self, amount: int) -> None:
        """Remove *amount* units; the result is re-validated as a StockQuantity."""
        _check_delta("decrease", amount)
        self.quantity = StockQuantity(self.quantity.value - amount)

    def change_quantity(self, new_quantity: StockQuantity) -> None:
        if new_quantity is None:
            raise DomainException("Stock quantity is required")
        self.quantity = new_quantity

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.quantity.value == StockQuantity.MIN

    @property
    def is_full(self) -> bool:
        return self.quantity.value == StockQuantity.MAX

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
