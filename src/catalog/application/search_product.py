"""Application service: product queries (by name, by id)."""

from __future__ import annotations

from catalog.application.assembler import assemble_dto
from catalog.application.dto import ProductDTO
from catalog.application.services import ProductService
from catalog.application.unit_of_work import UnitOfWorkFactory
from catalog.domain.model.identifiers import ProductId
from catalog.domain.model.value_objects import ProductName


class SearchProductByNameHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, name: str) -> ProductDTO:
        """Return the product whose name is exactly *name*."""
        product_name = ProductName.of(name)
        with self._uow_factory(read_only=True) as uow:
            product = ProductService(uow.products).get_product_by_name(product_name)
            return assemble_dto(product)


class ShowProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str) -> ProductDTO:
        pid = ProductId.from_string(product_id)
        with self._uow_factory(read_only=True) as uow:
            product = ProductService(uow.products).get_product_by_id(pid)
            return assemble_dto(product)
