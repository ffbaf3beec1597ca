"""CLI shim for running the compressor directly from the repository checkout."""

import sys

from enumpress.cli import main
from enumpress.codec import (
    decode_number_to_bytes,
    encode_bytes_to_number,
    interval_base,
)
from enumpress.shift import apply_shift

__all__ = [
    "apply_shift",
    "decode_number_to_bytes",
    "encode_bytes_to_number",
    "interval_base",
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
