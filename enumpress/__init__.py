"""Always-successful file compression over a bijection with the natural numbers."""

from .codec import (
    EncodedFile,
    decode_number_to_bytes,
    describe_bytes,
    describe_number,
    encode_bytes_to_number,
    interval_base,
    size_for_number,
)
from .errors import (
    ArgumentError,
    DomainError,
    EmptyFileError,
    EnumpressError,
    FileAccessError,
    InsufficientMagnitudeError,
)
from .shift import accumulate_shift, apply_shift, parse_shift_literal
from .transform import (
    TransformConfig,
    TransformReport,
    compress_bytes,
    decompress_bytes,
    max_compressions,
    transform_bytes,
    transform_file,
)

__all__ = [
    "ArgumentError",
    "DomainError",
    "EmptyFileError",
    "EncodedFile",
    "EnumpressError",
    "FileAccessError",
    "InsufficientMagnitudeError",
    "TransformConfig",
    "TransformReport",
    "accumulate_shift",
    "apply_shift",
    "compress_bytes",
    "decode_number_to_bytes",
    "decompress_bytes",
    "describe_bytes",
    "describe_number",
    "encode_bytes_to_number",
    "interval_base",
    "max_compressions",
    "parse_shift_literal",
    "size_for_number",
    "transform_bytes",
    "transform_file",
]

__version__ = "0.1.0"
