"""Decimal text for integers of any size.

``str(int)`` and ``int(str)`` refuse numbers past the interpreter's digit cap
(4300 digits by default), which an encoded file of about 1.8 KB already
exceeds. These helpers work in fixed-size chunks that each stay under it.
"""

from typing import List

_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def format_decimal(value: int) -> str:
    if value < 0:
        return "-" + format_decimal(-value)
    chunks: List[int] = []
    while value >= _CHUNK:
        value, rem = divmod(value, _CHUNK)
        chunks.append(rem)
    return str(value) + "".join(f"{rem:0{_CHUNK_DIGITS}d}" for rem in reversed(chunks))


def parse_decimal(digits: str) -> int:
    """Parse a string of ASCII decimal digits (no sign, no spaces)."""
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        piece = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(piece) + int(piece)
    return value


class DecimalText:
    """Lazy ``format_decimal`` for log arguments; only rendered when emitted."""

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __str__(self) -> str:
        return format_decimal(self.value)


__all__ = ["format_decimal", "parse_decimal", "DecimalText"]
