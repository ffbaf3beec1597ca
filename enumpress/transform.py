"""Read a file, shift its encoded number, and write the decoded result back.

Everything is computed in memory before the file is reopened for writing,
so a failed read or a rejected shift leaves the file exactly as it was.
"""

import dataclasses
import os
import shutil
import tempfile
from typing import Optional, Tuple

from .codec import EncodedFile, decode_number_to_bytes, describe_bytes, describe_number
from .errors import FileAccessError
from .formatting import DecimalText
from .logging_config import get_logger
from .shift import apply_shift

logger = get_logger(__name__)


@dataclasses.dataclass
class TransformConfig:
    shift: int = 0
    verbose: bool = False


@dataclasses.dataclass
class TransformReport:
    before: EncodedFile
    after: EncodedFile
    shift: int

    @property
    def original_size(self) -> int:
        return self.before.size

    @property
    def new_size(self) -> int:
        return self.after.size


def _trace_interval(label: str, encoded: EncodedFile) -> None:
    logger.debug("%s: filesize = %d", label, encoded.size)
    logger.debug("%s: interval base = %s", label, DecimalText(encoded.base))
    logger.debug("%s: interval offset = %s", label, DecimalText(encoded.offset))


def _shift_contents(
    data: bytes, shift: int, verbose: bool
) -> Tuple[EncodedFile, EncodedFile, bytes]:
    before = describe_bytes(data)
    if verbose:
        _trace_interval("get", before)
        logger.debug("get (filename) = %s", DecimalText(before.number))

    shifted = apply_shift(before.number, shift)
    after = describe_number(shifted)
    if verbose:
        logger.debug("n - compress = %s", DecimalText(shifted))
        _trace_interval("put", after)

    return before, after, decode_number_to_bytes(shifted)


def transform_bytes(
    data: bytes, shift: int, config: Optional[TransformConfig] = None
) -> bytes:
    """Compress ``data`` by ``shift`` steps; a negative shift decompresses."""
    verbose = config.verbose if config is not None else False
    _, _, result = _shift_contents(data, shift, verbose)
    return result


def compress_bytes(data: bytes, times: int = 1) -> bytes:
    return transform_bytes(data, times)


def decompress_bytes(data: bytes, times: int = 1) -> bytes:
    return transform_bytes(data, -times)


def max_compressions(data: bytes) -> int:
    """Number of compress steps that turn ``data`` into the empty string."""
    return describe_bytes(data).number


def _read_file(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise FileAccessError(path, operation="read") from exc


def _write_file(path: str, data: bytes) -> None:
    """Replace the contents of ``path`` with ``data``.

    The bytes go to a sibling temporary file first and are renamed over the
    target, so a failed or short write never leaves the target truncated.
    """
    target = os.path.realpath(path)
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=os.path.dirname(target), prefix=".enumpress-", suffix=".tmp"
        )
    except OSError as exc:
        raise FileAccessError(path, operation="write") from exc
    try:
        with os.fdopen(fd, "wb") as f:
            written = f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if written != len(data):
            raise FileAccessError(path, operation="write")
        shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except FileAccessError:
        _discard(tmp_path)
        raise
    except OSError as exc:
        _discard(tmp_path)
        raise FileAccessError(path, operation="write") from exc


def _discard(tmp_path: str) -> None:
    try:
        os.unlink(tmp_path)
    except FileNotFoundError:
        pass


def transform_file(path: str, config: TransformConfig) -> TransformReport:
    """Rewrite ``path`` in place with its contents shifted by ``config.shift``."""
    if config.verbose:
        logger.debug("compress = %s", DecimalText(config.shift))
    data = _read_file(path)
    before, after, result = _shift_contents(data, config.shift, config.verbose)
    _write_file(path, result)
    return TransformReport(before=before, after=after, shift=config.shift)


__all__ = [
    "TransformConfig",
    "TransformReport",
    "transform_bytes",
    "compress_bytes",
    "decompress_bytes",
    "max_compressions",
    "transform_file",
]
