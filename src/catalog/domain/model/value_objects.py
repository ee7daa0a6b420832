"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist: every
layer above receives already-validated instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from catalog.domain.exceptions import DomainException
from catalog.domain.model.text import trim


# ── Text ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class _BoundedName:
    """A required, trimmed string with a maximum length."""

    value: str

    label: ClassVar[str] = "Name"
    max_length: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if self.value is None:
            raise DomainException(f"{self.label} is required")
        if not isinstance(self.value, str):
            raise DomainException(
                f"{self.label} must be a string, got {type(self.value).__name__}"
            )
        trimmed = trim(self.value)
        if not trimmed:
            raise DomainException(f"{self.label} must not be empty")
        if len(trimmed) > self.max_length:
            raise DomainException(
                f"{self.label} must be at most {self.max_length} characters: {trimmed!r}"
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryName(_BoundedName):
    label: ClassVar[str] = "Category name"
    max_length: ClassVar[int] = 20

    @staticmethod
    def of(raw: str | None) -> CategoryName:
        return CategoryName(raw)


@dataclass(frozen=True)
class ProductName(_BoundedName):
    label: ClassVar[str] = "Product name"
    max_length: ClassVar[int] = 30

    @staticmethod
    def of(raw: str | None) -> ProductName:
        return ProductName(raw)


# ── Numbers ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class _BoundedInt:
    """A required integer within an inclusive range."""

    value: int

    label: ClassVar[str] = "Value"
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if self.value is None:
            raise DomainException(f"{self.label} is required")
        # bool is an int subclass, but True is not a price
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DomainException(
                f"{self.label} must be an integer, got {type(self.value).__name__}"
            )
        if self.value < self.MIN or self.value > self.MAX:
            raise DomainException(
                f"{self.label} must be between {self.MIN} and {self.MAX}: {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProductPrice(_BoundedInt):
    """Unit price in yen."""

    label: ClassVar[str] = "Product price"
    MIN: ClassVar[int] = 50
    MAX: ClassVar[int] = 10_000

    @staticmethod
    def of(raw: int | None) -> ProductPrice:
        return ProductPrice(raw)


@dataclass(frozen=True)
class StockQuantity(_BoundedInt):
    label: ClassVar[str] = "Stock quantity"
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 100

    @staticmethod
    def of(raw: int | None) -> StockQuantity:
        return StockQuantity(raw)
