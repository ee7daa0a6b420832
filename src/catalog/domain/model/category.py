"""Category entity.

Products are grouped by category. A product refers to its category by
id only; the category knows nothing about its products.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import DomainException
from catalog.domain.model.identifiers import CategoryId
from catalog.domain.model.value_objects import CategoryName


@dataclass(eq=False)
class Category:
    """Identity is the ``CategoryId``; the name may be changed."""

    id: CategoryId
    name: CategoryName

    def __post_init__(self) -> None:
        if self.id is None:
            raise DomainException("Category id is required")
        if self.name is None:
            raise DomainException("Category name is required")

    @staticmethod
    def create_new(name: CategoryName) -> Category:
        return Category(CategoryId.create_new(), name)

    @staticmethod
    def restore(category_id: CategoryId, name: CategoryName) -> Category:
        """Rebuild an existing category with a known id."""
        return Category(category_id, name)

    def rename(self, new_name: CategoryName) -> None:
        if new_name is None:
            raise DomainException("Category name is required")
        self.name = new_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
