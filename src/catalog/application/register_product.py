"""Application service: Register Product use case.

Orchestrates the category lookup, the aggregate assembly, the name
check and the insert inside one write transaction. Nothing is kept if
any step fails.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from catalog.application.assembler import assemble_domain, assemble_dto, to_category_dto
from catalog.application.dto import ProductDTO
from catalog.application.exceptions import InvalidInputError
from catalog.application.services import CategoryService, ProductService
from catalog.application.unit_of_work import UnitOfWorkFactory
from catalog.domain.model.identifiers import CategoryId

logger = logging.getLogger(__name__)


class RegisterProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, dto: ProductDTO) -> ProductDTO:
        """Register a new product and return it as stored.

        Steps:
        1. Resolve the category named by ``dto.category.id`` (must exist).
        2. Replace the DTO's category with the stored one, so the stored
           name wins over whatever the client sent.
        3. Assemble the Product aggregate from the DTO.
        4. Reject a name that is already taken, then insert.
        5. Read the product back by name; the returned DTO carries the
           generated product and stock ids.
        """
        if dto is None:
            raise InvalidInputError("ProductDTO is required")
        if dto.category is None:
            raise InvalidInputError("CategoryDTO is required")

        with self._uow_factory() as uow:
            categories = CategoryService(uow.categories)
            products = ProductService(uow.products)

            category = categories.get_category_by_id(
                CategoryId.from_string(dto.category.id)
            )
            dto = replace(dto, category=to_category_dto(category))

            product = assemble_domain(dto)
            products.ensure_name_is_free(product.name)
            products.add_product(product)

            registered = products.get_product_by_name(product.name)
            result = assemble_dto(registered)

        logger.info(
            "Registered product %s (%s) in category %s",
            result.id,
            result.name,
            category.id,
        )
        return result
