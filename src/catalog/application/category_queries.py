"""Application service: category queries and the product-name check.

These back the registration form: pick a category, check the name is
still free, then submit.
"""

from __future__ import annotations

from catalog.application.assembler import to_category_dto
from catalog.application.dto import CategoryDTO
from catalog.application.services import CategoryService, ProductService
from catalog.application.unit_of_work import UnitOfWorkFactory
from catalog.domain.model.identifiers import CategoryId
from catalog.domain.model.value_objects import ProductName


class ListCategoriesHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self) -> list[CategoryDTO]:
        with self._uow_factory(read_only=True) as uow:
            categories = CategoryService(uow.categories).get_categories()
            return [to_category_dto(c) for c in categories]


class ShowCategoryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, category_id: str) -> CategoryDTO:
        """Look up a category by its UUID in any letter case."""
        cid = CategoryId.from_string(category_id)
        with self._uow_factory(read_only=True) as uow:
            category = CategoryService(uow.categories).get_category_by_id(cid)
            return to_category_dto(category)


class CheckProductNameHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str) -> None:
        """Return quietly if *name* is free; raise ExistsError otherwise."""
        product_name = ProductName.of(name)
        with self._uow_factory(read_only=True) as uow:
            ProductService(uow.products).ensure_name_is_free(product_name)
