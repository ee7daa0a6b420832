"""Row records, one per table.

Plain containers with one attribute per column. Surrogate and
foreign-key columns are ``None`` until the database or the repository
fills them in.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class CategoryRow:
    id: int | None = None
    category_uuid: str | None = None
    name: str | None = None


@dataclass
class ProductRow:
    id: int | None = None
    product_uuid: str | None = None
    name: str | None = None
    price: int | None = None
    category_id: int | None = None


@dataclass
class StockRow:
    id: int | None = None
    stock_uuid: str | None = None
    stock: int | None = None
    product_id: int | None = None


def insert_values(row: CategoryRow | ProductRow | StockRow) -> dict[str, Any]:
    """Column values for an INSERT; the surrogate key is left to the database."""
    values = asdict(row)
    values.pop("id")
    return values
