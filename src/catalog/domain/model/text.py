"""Trimming of user-supplied text.

Only ASCII control characters and the plain space (U+0000..U+0020) are
trimmed. Other whitespace, such as the full-width space U+3000, is kept
as part of the value.
"""

from __future__ import annotations

_TRIMMED = "".join(chr(code) for code in range(0x21))


def trim(value: str) -> str:
    return value.strip(_TRIMMED)


def is_blank(value: str | None) -> bool:
    """True for None and for strings that are empty once trimmed."""
    return value is None or (isinstance(value, str) and not trim(value))
