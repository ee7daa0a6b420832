"""Abstract repository for the Category entity.

Defined in the domain layer so the domain never depends on
infrastructure. The SQL implementation lives in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category
from catalog.domain.model.identifiers import CategoryId


class CategoryRepository(ABC):

    @abstractmethod
    def find_by_id(self, category_id: CategoryId) -> Category | None:
        """Return the category with this id, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Category]:
        """Return every category, always in the same order."""
