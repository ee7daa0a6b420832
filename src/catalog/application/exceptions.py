"""Application-level exceptions.

Raised by mappers, assemblers and services when a request cannot be
served; translated into a response only at the outer boundaries.
"""

from catalog.domain.exceptions import CatalogError, ErrorKind


class InvalidInputError(CatalogError):
    """A DTO, or a required part of it, is missing or blank."""

    kind = ErrorKind.INVALID_INPUT


class NotFoundError(CatalogError):
    """A lookup by identifier found nothing."""

    kind = ErrorKind.NOT_FOUND


class ExistsError(CatalogError):
    """The data being registered already exists."""

    kind = ErrorKind.CONFLICT
