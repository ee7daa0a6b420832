"""Demo data: the categories the registration form offers and a few products.

Seeding is idempotent; rows that already exist are left alone.
"""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import (
    CategoryName,
    ProductName,
    ProductPrice,
    StockQuantity,
)
from catalog.infrastructure.persistence import tables
from catalog.infrastructure.persistence.row_mappers import category_entity_to_row
from catalog.infrastructure.persistence.rows import insert_values
from catalog.infrastructure.persistence.sql_category_repository import (
    SqlCategoryRepository,
)
from catalog.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)

logger = logging.getLogger(__name__)

STATIONERY_ID = "2d8e2b0d-49ef-4b36-a4f3-1c6a2e0b84c4"
GOODS_ID = "ac413f22-0cf1-490a-9635-7e9ca810e544"
PC_ACCESSORIES_ID = "8f81a72a-58ef-422b-b472-d982e8665292"

CATEGORIES: list[tuple[str, str]] = [
    (STATIONERY_ID, "文房具"),
    (GOODS_ID, "雑貨"),
    (PC_ACCESSORIES_ID, "パソコン周辺機器"),
]

# (name, price, category id, initial stock)
PRODUCTS: list[tuple[str, int, str, int]] = [
    ("蛍光ペン(赤)", 130, STATIONERY_ID, 100),
    ("蛍光ペン(黄)", 130, STATIONERY_ID, 100),
    ("蛍光ペン(緑)", 130, STATIONERY_ID, 100),
    ("油性ボールペン(黒)", 120, STATIONERY_ID, 50),
    ("水性ボールペン(青)", 120, STATIONERY_ID, 50),
    ("シャープペンシル", 300, STATIONERY_ID, 30),
    ("マグカップ", 800, GOODS_ID, 20),
    ("USBメモリ", 1500, PC_ACCESSORIES_ID, 10),
]


def seed(engine: Engine) -> tuple[int, int]:
    """Insert the demo rows; return (categories added, products added)."""
    added_categories = 0
    added_products = 0

    with engine.begin() as connection:
        categories = SqlCategoryRepository(connection)
        products = SqlProductRepository(connection)

        by_id: dict[str, Category] = {}
        for raw_id, raw_name in CATEGORIES:
            category_id = CategoryId.from_string(raw_id)
            category = categories.find_by_id(category_id)
            if category is None:
                category = Category.restore(category_id, CategoryName.of(raw_name))
                connection.execute(
                    tables.product_category.insert().values(
                        **insert_values(category_entity_to_row(category))
                    )
                )
                added_categories += 1
            by_id[category.id.value] = category

        for raw_name, price, category_id, quantity in PRODUCTS:
            name = ProductName.of(raw_name)
            if products.exists_by_name(name):
                continue
            products.create(
                Product.create_new(
                    name,
                    ProductPrice.of(price),
                    by_id[category_id],
                    StockQuantity.of(quantity),
                )
            )
            added_products += 1

    logger.info(
        "Seeded %d categories and %d products", added_categories, added_products
    )
    return added_categories, added_products
