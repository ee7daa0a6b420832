"""Infrastructure errors and the translation of driver failures.

The persistence layer is the only place an ``InfrastructureError`` is
created. Catalog errors raised while talking to the database (a missing
category, a duplicate name) keep their own kind and pass through.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from catalog.domain.exceptions import CatalogError, ErrorKind

logger = logging.getLogger(__name__)


class InfrastructureError(CatalogError):
    """A database or other technical failure; always carries its cause."""

    kind = ErrorKind.INFRASTRUCTURE

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Wrap anything unexpected raised while *action* in InfrastructureError."""
    try:
        yield
    except CatalogError:
        raise
    except SQLAlchemyError as exc:
        logger.error("Database error while %s", action, exc_info=True)
        raise InfrastructureError(f"Database error while {action}", exc) from exc
    except Exception as exc:
        logger.error("Unexpected error while %s", action, exc_info=True)
        raise InfrastructureError(f"Unexpected error while {action}", exc) from exc
