"""Relational schema for the catalog.

Each table has a private integer surrogate key used only for joins and
a UUID column holding the external identity.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

product_category = Table(
    "product_category",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("category_uuid", String(36), nullable=False, unique=True),
    Column("name", String(20), nullable=False),
)

product = Table(
    "product",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("product_uuid", String(36), nullable=False, unique=True),
    Column("name", String(30), nullable=False),
    Column("price", Integer, nullable=False),
    Column(
        "category_id",
        Integer,
        ForeignKey("product_category.id"),
        nullable=False,
    ),
    UniqueConstraint("name", name="uq_product_name"),
)

product_stock = Table(
    "product_stock",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("stock_uuid", String(36), nullable=False, unique=True),
    Column("stock", Integer, nullable=False),
    Column("product_id", Integer, ForeignKey("product.id"), nullable=False),
)
