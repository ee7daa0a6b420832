"""Error taxonomy shared by every layer.

Each error carries a ``kind`` so the outer boundaries (HTTP, CLI) can
translate it without knowing the concrete class that was raised.
Business rule violations are expressed as ``DomainException``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INPUT_VALIDATION = "input-validation"
    INVALID_INPUT = "invalid-input"
    DOMAIN = "domain"
    NOT_FOUND = "not-found"
    CONFLICT = "conflict"
    INFRASTRUCTURE = "infrastructure"


class CatalogError(Exception):
    """Base class for all errors the catalog raises on purpose."""

    kind: ErrorKind = ErrorKind.DOMAIN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DomainException(CatalogError):
    """A value object, entity or aggregate invariant was violated."""

    kind = ErrorKind.DOMAIN
