import re
from typing import Iterable

from .errors import ArgumentError, EmptyFileError, InsufficientMagnitudeError
from .formatting import parse_decimal

_LITERAL_PATTERN = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hex>[0-9a-fA-F]+)
      | 0[bB](?P<bin>[01]+)
      | 0[oO](?P<oct>[0-7]+)
      | (?P<legacy_oct>0[0-7]*)
      | (?P<dec>[1-9][0-9]*)
    )
    """,
    re.VERBOSE,
)

_RADIX = {"hex": 16, "bin": 2, "oct": 8, "legacy_oct": 8, "dec": 10}


def parse_shift_literal(text: str) -> int:
    """Parse a signed integer literal, picking the radix from its prefix.

    ``0x`` is hexadecimal, ``0b`` binary, ``0o`` or a bare leading ``0`` octal,
    anything else decimal.
    """
    match = _LITERAL_PATTERN.fullmatch(text)
    if match is None:
        raise ArgumentError(f"Argument is not an integer: {text!r}", context={"value": text})
    for group, radix in _RADIX.items():
        digits = match.group(group)
        if digits is not None:
            value = parse_decimal(digits) if radix == 10 else int(digits, radix)
            break
    return -value if match.group("sign") == "-" else value


def accumulate_shift(terms: Iterable[int]) -> int:
    """Net shift from per-flag contributions, in command line order."""
    total = 0
    for term in terms:
        total += term
    return total


def apply_shift(current: int, shift: int) -> int:
    """Compress ``current`` by ``shift`` steps (decompress when negative)."""
    if current == 0 and shift > 0:
        raise EmptyFileError()
    if current < shift:
        raise InsufficientMagnitudeError(max_safe_count=current, requested=shift)
    return current - shift


__all__ = ["parse_shift_literal", "accumulate_shift", "apply_shift"]
