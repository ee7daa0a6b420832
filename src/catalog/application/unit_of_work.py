"""Transaction boundary for the use cases.

A unit of work hands out repositories bound to a single transaction.
Use it as a context manager: a clean exit commits (unless the unit is
read-only), any exception rolls back, and the underlying connection is
released on every path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Protocol

from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    categories: CategoryRepository
    products: ProductRepository

    def __init__(self, read_only: bool = False) -> None:
        self.read_only = read_only

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is None and not self.read_only:
                self._commit()
            else:
                self._rollback()
        finally:
            self._close()

    @abstractmethod
    def _begin(self) -> None:
        """Acquire a connection, start a transaction, bind the repositories."""

    @abstractmethod
    def _commit(self) -> None: ...

    @abstractmethod
    def _rollback(self) -> None: ...

    @abstractmethod
    def _close(self) -> None: ...


class UnitOfWorkFactory(Protocol):

    def __call__(self, read_only: bool = False) -> UnitOfWork: ...
