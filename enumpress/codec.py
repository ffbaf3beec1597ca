"""Bijection between byte strings and natural numbers.

The empty string maps to 0. The 256 one-byte strings map to 1..256, the
65536 two-byte strings to 257..65792, and so on: every string of length N
lands in the interval starting at

    interval_base(N) = (256**N - 1) // 255

(the number of strings shorter than N), at an offset equal to its contents
read as a little-endian unsigned integer.
"""

import dataclasses

from .errors import DomainError
from .formatting import format_decimal


@dataclasses.dataclass(frozen=True)
class EncodedFile:
    size: int
    base: int
    offset: int

    @property
    def number(self) -> int:
        return self.base + self.offset


def interval_base(size: int) -> int:
    if size < 0:
        raise DomainError(f"size must be >= 0, got {size}")
    # 256**size - 1 is always divisible by 255
    return ((1 << (8 * size)) - 1) // 255


def size_for_number(number: int) -> int:
    """Length of the byte string that ``number`` decodes to.

    ``256**N`` occupies exactly ``8N + 1`` bits, so the largest N with
    ``256**N <= 255 * number + 1`` is read off the bit length.
    """
    if number < 0:
        raise DomainError(f"cannot decode a negative number: {format_decimal(number)}")
    return ((255 * number + 1).bit_length() - 1) // 8


def describe_bytes(data: bytes) -> EncodedFile:
    size = len(data)
    return EncodedFile(
        size=size,
        base=interval_base(size),
        offset=int.from_bytes(data, byteorder="little", signed=False),
    )


def describe_number(number: int) -> EncodedFile:
    size = size_for_number(number)
    base = interval_base(size)
    return EncodedFile(size=size, base=base, offset=number - base)


def encode_bytes_to_number(data: bytes) -> int:
    return describe_bytes(data).number


def decode_number_to_bytes(number: int) -> bytes:
    encoded = describe_number(number)
    # to_bytes pads the high end, so offset 0 still yields `size` zero bytes
    return encoded.offset.to_bytes(encoded.size, byteorder="little", signed=False)


__all__ = [
    "EncodedFile",
    "interval_base",
    "size_for_number",
    "describe_bytes",
    "describe_number",
    "encode_bytes_to_number",
    "decode_number_to_bytes",
]
