"""Identifier value objects.

Every aggregate member is identified by a UUID held in its canonical
form: 36 characters, lowercase, hyphenated. Input of any letter case is
accepted and normalized.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from catalog.domain.exceptions import DomainException
from catalog.domain.model.text import is_blank, trim

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

_IdT = TypeVar("_IdT", bound="UuidIdentifier")


@dataclass(frozen=True)
class UuidIdentifier:
    """Base for the UUID-backed ids.

    Ids of different subclasses never compare equal, even when they
    carry the same string.
    """

    value: str

    label: ClassVar[str] = "Id"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or is_blank(self.value):
            raise DomainException(f"{self.label} is required")
        candidate = trim(self.value)
        if not _UUID_PATTERN.match(candidate):
            raise DomainException(
                f"{self.label} must be a UUID: {self.value!r}"
            )
        object.__setattr__(self, "value", candidate.lower())

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create_new(cls: type[_IdT]) -> _IdT:
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_string(cls: type[_IdT], raw: str | None) -> _IdT:
        """Parse *raw* into a canonical id, raising DomainException if invalid."""
        if raw is None:
            raise DomainException(f"{cls.label} is required")
        return cls(raw)


@dataclass(frozen=True)
class CategoryId(UuidIdentifier):
    label: ClassVar[str] = "CategoryId"


@dataclass(frozen=True)
class ProductId(UuidIdentifier):
    label: ClassVar[str] = "ProductId"


@dataclass(frozen=True)
class StockId(UuidIdentifier):
    label: ClassVar[str] = "StockId"
