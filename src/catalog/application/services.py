"""Application services over the repositories.

Thin facades that turn "nothing found" and "already there" into
application exceptions, so the handlers read as a straight sequence of
steps. They never open transactions; the handlers do.
"""

from __future__ import annotations

from catalog.application.exceptions import ExistsError, NotFoundError
from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId, ProductId
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductName
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class CategoryService:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def get_categories(self) -> list[Category]:
        return self._category_repo.find_all()

    def get_category_by_id(self, category_id: CategoryId) -> Category:
        category = self._category_repo.find_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category id:[{category_id.value}] does not exist")
        return category


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def ensure_name_is_free(self, name: ProductName) -> None:
        """Raise ExistsError if a product already uses *name*."""
        if self._product_repo.exists_by_name(name):
            raise ExistsError(f"Product name:[{name.value}] is already registered")

    def get_product_by_id(self, product_id: ProductId) -> Product:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product id:[{product_id.value}] does not exist")
        return product

    def get_product_by_name(self, name: ProductName) -> Product:
        product = self._product_repo.find_by_name(name)
        if product is None:
            raise NotFoundError(f"Product name:[{name.value}] does not exist")
        return product

    def add_product(self, product: Product) -> None:
        self._product_repo.create(product)
