"""Unit tests for the Product aggregate."""

import pytest

from catalog.domain.exceptions import DomainException
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId, ProductId, StockId
from catalog.domain.model.product import Product
from catalog.domain.model.stock import Stock
from catalog.domain.model.value_objects import (
    CategoryName,
    ProductName,
    ProductPrice,
    StockQuantity,
)

PRODUCT_UUID = "83fbc81d-2498-4da6-b8c2-54878d3b67ff"


def _category() -> Category:
    return Category.restore(
        CategoryId.from_string("2d8e2b0d-49ef-4b36-a4f3-1c6a2e0b84c4"),
        CategoryName.of("文房具"),
    )


def _stock(quantity: int = 10) -> Stock:
    return Stock.restore(
        StockId.from_string("e4850253-f363-4e79-8110-7335e4af45be"),
        StockQuantity.of(quantity),
    )


def _restored() -> Product:
    return Product.restore(
        ProductId.from_string(PRODUCT_UUID),
        ProductName.of("蛍光ペン(赤)"),
        ProductPrice.of(130),
        _category(),
        _stock(),
    )


class TestProductCreateNew:

    def test_generates_ids_and_stock(self):
        p = Product.create_new(
            ProductName.of("万年筆"), ProductPrice.of(1200), _category(), StockQuantity.of(10)
        )
        assert len(p.id.value) == 36
        assert p.category == _category()
        assert p.stock.quantity.value == 10
        assert len(p.stock.id.value) == 36
        assert not p.is_skeleton

    @pytest.mark.parametrize("missing", ["name", "price", "category", "quantity"])
    def test_all_arguments_required(self, missing):
        args = {
            "name": ProductName.of("万年筆"),
            "price": ProductPrice.of(1200),
            "category": _category(),
            "quantity": StockQuantity.of(10),
        }
        args[missing] = None
        with pytest.raises(DomainException, match="required"):
            Product.create_new(
                args["name"], args["price"], args["category"], args["quantity"]
            )


class TestProductRestore:

    def test_restore_keeps_everything(self):
        p = _restored()
        assert p.id.value == PRODUCT_UUID
        assert p.name.value == "蛍光ペン(赤)"
        assert p.price.value == 130
        assert p.category.name.value == "文房具"
        assert p.current_quantity == StockQuantity.of(10)

    def test_restore_requires_category(self):
        with pytest.raises(DomainException, match="category is required"):
            Product.restore(
                ProductId.from_string(PRODUCT_UUID),
                ProductName.of("x"),
                ProductPrice.of(100),
                None,
                _stock(),
            )

    def test_restore_requires_stock(self):
        with pytest.raises(DomainException, match="stock is required"):
            Product.restore(
                ProductId.from_string(PRODUCT_UUID),
                ProductName.of("x"),
                ProductPrice.of(100),
                _category(),
                None,
            )

    def test_skeleton_has_neither(self):
        p = Product.restore_skeleton(
            ProductId.from_string(PRODUCT_UUID), ProductName.of("x"), ProductPrice.of(100)
        )
        assert p.is_skeleton
        assert p.category is None and p.stock is None
        assert p.current_quantity is None

    def test_half_formed_product_rejected(self):
        with pytest.raises(DomainException, match="set together"):
            Product(
                ProductId.from_string(PRODUCT_UUID),
                ProductName.of("x"),
                ProductPrice.of(100),
                category=_category(),
            )

    def test_id_name_price_required(self):
        with pytest.raises(DomainException, match="Product id is required"):
            Product.restore_skeleton(None, ProductName.of("x"), ProductPrice.of(100))
        with pytest.raises(DomainException, match="Product name is required"):
            Product.restore_skeleton(
                ProductId.from_string(PRODUCT_UUID), None, ProductPrice.of(100)
            )
        with pytest.raises(DomainException, match="Product price is required"):
            Product.restore_skeleton(
                ProductId.from_string(PRODUCT_UUID), ProductName.of("x"), None
            )


class TestProductMutations:

    def test_rename(self):
        p = _restored()
        p.rename(ProductName.of("蛍光ペン(青)"))
        assert p.name.value == "蛍光ペン(青)"

    def test_reprice(self):
        p = _restored()
        p.reprice(ProductPrice.of(150))
        assert p.price.value == 150

    def test_rename_and_reprice_reject_none(self):
        p = _restored()
        with pytest.raises(DomainException):
            p.rename(None)
        with pytest.raises(DomainException):
            p.reprice(None)

    def test_change_stock(self):
        p = _restored()
        p.change_stock(StockQuantity.of(0))
        assert p.stock.is_empty

    def test_change_stock_on_skeleton_rejected(self):
        p = Product.restore_skeleton(
            ProductId.from_string(PRODUCT_UUID), ProductName.of("x"), ProductPrice.of(100)
        )
        with pytest.raises(DomainException, match="no stock attached"):
            p.change_stock(StockQuantity.of(1))

    def test_attach_completes_skeleton(self):
        p = Product.restore_skeleton(
            ProductId.from_string(PRODUCT_UUID), ProductName.of("x"), ProductPrice.of(100)
        )
        p.attach_category(_category())
        p.attach_stock(_stock())
        p.ensure_complete()
        assert not p.is_skeleton

    def test_attach_rejects_none(self):
        p = _restored()
        with pytest.raises(DomainException):
            p.attach_category(None)
        with pytest.raises(DomainException):
            p.attach_stock(None)

    def test_ensure_complete_rejects_skeleton(self):
        p = Product.restore_skeleton(
            ProductId.from_string(PRODUCT_UUID), ProductName.of("x"), ProductPrice.of(100)
        )
        with pytest.raises(DomainException, match="incomplete"):
            p.ensure_complete()


class TestProductIdentity:

    def test_equal_by_id_only(self):
        a = _restored()
        b = Product.restore_skeleton(
            ProductId.from_string(PRODUCT_UUID.upper()),
            ProductName.of("別物"),
            ProductPrice.of(9999),
        )
        assert a == b
        assert hash(a) == hash(b)

    def test_different_ids_not_equal(self):
        assert _restored() != Product.create_new(
            ProductName.of("蛍光ペン(赤)"), ProductPrice.of(130), _category(), StockQuantity.of(10)
        )
