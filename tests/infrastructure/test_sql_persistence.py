"""Tests for the SQL repositories and unit of work against SQLite."""

import pytest
from sqlalchemy import func, select

from catalog.application.exceptions import ExistsError
from catalog.domain.exceptions import DomainException, ErrorKind
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId, ProductId
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import (
    CategoryName,
    ProductName,
    ProductPrice,
    StockQuantity,
)
from catalog.infrastructure.exceptions import InfrastructureError
from catalog.infrastructure.persistence import tables
from catalog.infrastructure.persistence.database import create_tables, drop_tables
from catalog.infrastructure.persistence.seed import (
    CATEGORIES,
    GOODS_ID,
    PRODUCTS,
    STATIONERY_ID,
    seed,
)
from catalog.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork

MISSING = "00000000-0000-4000-8000-000000000000"


def _stationery() -> Category:
    return Category.restore(CategoryId.from_string(STATIONERY_ID), CategoryName.of("文房具"))


def _new_product(name: str = "万年筆", category: Category | None = None) -> Product:
    return Product.create_new(
        ProductName.of(name),
        ProductPrice.of(1200),
        category or _stationery(),
        StockQuantity.of(10),
    )


def _count(engine, table) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(table)).scalar_one()


# ── Categories ───────────────────────────────────────────────────────────────


class TestSqlCategoryRepository:

    def test_find_all_in_insertion_order(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            categories = uow.categories.find_all()
        assert [c.id.value for c in categories] == [raw_id for raw_id, _ in CATEGORIES]
        assert categories[0].name.value == "文房具"

    def test_find_by_id(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            category = uow.categories.find_by_id(CategoryId.from_string(GOODS_ID.upper()))
        assert category.name.value == "雑貨"

    def test_find_by_id_missing(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            assert uow.categories.find_by_id(CategoryId.from_string(MISSING)) is None


# ── Products ─────────────────────────────────────────────────────────────────


class TestSqlProductRepository:

    def test_create_and_read_back(self, engine):
        product = _new_product()
        with SqlUnitOfWork(engine) as uow:
            uow.products.create(product)

        with SqlUnitOfWork(engine, read_only=True) as uow:
            by_name = uow.products.find_by_name(ProductName.of("万年筆"))
            by_id = uow.products.find_by_id(product.id)

        assert by_name == product
        assert by_id == product
        assert by_name.category.name.value == "文房具"
        assert by_name.stock.id == product.stock.id
        assert by_name.stock.quantity.value == 10

    def test_create_writes_both_rows(self, engine):
        products_before = _count(engine, tables.product)
        stock_before = _count(engine, tables.product_stock)
        with SqlUnitOfWork(engine) as uow:
            uow.products.create(_new_product())
        assert _count(engine, tables.product) == products_before + 1
        assert _count(engine, tables.product_stock) == stock_before + 1

    def test_seeded_product_joined(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            mug = uow.products.find_by_name(ProductName.of("マグカップ"))
        assert mug.price.value == 800
        assert mug.category.id.value == GOODS_ID
        assert mug.stock.quantity.value == 20

    def test_exists_by_name(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            assert uow.products.exists_by_name(ProductName.of("蛍光ペン(黄)"))
            assert not uow.products.exists_by_name(ProductName.of("蛍光ペン"))

    def test_find_missing(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            assert uow.products.find_by_id(ProductId.from_string(MISSING)) is None
            assert uow.products.find_by_name(ProductName.of("存在しない")) is None

    def test_unknown_category_is_domain_error(self, engine):
        ghost = Category.restore(CategoryId.from_string(MISSING), CategoryName.of("幽霊"))
        with pytest.raises(DomainException, match="Category does not exist"):
            with SqlUnitOfWork(engine) as uow:
                uow.products.create(_new_product(category=ghost))

    def test_skeleton_rejected(self, engine):
        skeleton = Product.restore_skeleton(
            ProductId.create_new(), ProductName.of("万年筆"), ProductPrice.of(1200)
        )
        with pytest.raises(DomainException, match="incomplete"):
            with SqlUnitOfWork(engine) as uow:
                uow.products.create(skeleton)

    def test_unique_constraint_maps_to_conflict(self, engine):
        with pytest.raises(ExistsError) as info:
            with SqlUnitOfWork(engine) as uow:
                uow.products.create(_new_product("蛍光ペン(赤)"))
        assert info.value.kind is ErrorKind.CONFLICT


# ── Unit of work ─────────────────────────────────────────────────────────────


class TestSqlUnitOfWork:

    def test_exception_rolls_back(self, engine):
        with pytest.raises(RuntimeError):
            with SqlUnitOfWork(engine) as uow:
                uow.products.create(_new_product())
                raise RuntimeError("abort")

        with SqlUnitOfWork(engine, read_only=True) as uow:
            assert not uow.products.exists_by_name(ProductName.of("万年筆"))

    def test_read_only_unit_discards_writes(self, engine):
        with SqlUnitOfWork(engine, read_only=True) as uow:
            uow.products.create(_new_product())

        with SqlUnitOfWork(engine, read_only=True) as uow:
            assert not uow.products.exists_by_name(ProductName.of("万年筆"))

    def test_stock_row_not_left_behind_on_failure(self, engine):
        stock_before = _count(engine, tables.product_stock)
        with pytest.raises(ExistsError):
            with SqlUnitOfWork(engine) as uow:
                uow.products.create(_new_product("万年筆"))
                uow.products.create(_new_product("蛍光ペン(赤)"))
        assert _count(engine, tables.product_stock) == stock_before

    def test_connection_released(self, engine):
        uow = SqlUnitOfWork(engine)
        with uow:
            assert uow._connection is not None
        assert uow._connection is None

    def test_missing_tables_become_infrastructure_error(self, bare_engine):
        with pytest.raises(InfrastructureError, match="Database error while listing categories") as info:
            with SqlUnitOfWork(bare_engine, read_only=True) as uow:
                uow.categories.find_all()
        assert info.value.kind is ErrorKind.INFRASTRUCTURE
        assert info.value.cause is not None


# ── Seed ─────────────────────────────────────────────────────────────────────


class TestSeed:

    def test_seeded_counts(self, engine):
        assert _count(engine, tables.product_category) == len(CATEGORIES)
        assert _count(engine, tables.product) == len(PRODUCTS)
        assert _count(engine, tables.product_stock) == len(PRODUCTS)

    def test_drop_tables_then_recreate(self, engine):
        drop_tables(engine)
        with pytest.raises(InfrastructureError):
            with SqlUnitOfWork(engine, read_only=True) as uow:
                uow.categories.find_all()

        create_tables(engine)
        assert _count(engine, tables.product_category) == 0

    def test_seed_is_idempotent(self, engine):
        assert seed(engine) == (0, 0)
        assert _count(engine, tables.product) == len(PRODUCTS)
