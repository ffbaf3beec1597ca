"""Exceptions raised by the enumerator, the shift engine and the file driver.

Every error carries a stable integer ``code`` and a shallow ``context`` dict so
callers can classify failures without matching on message text. ``cli.main``
is the only place that turns them into output and an exit status.
"""

from enum import IntEnum
from typing import Any, Dict, Mapping, Optional

from .formatting import format_decimal

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ErrorCode(IntEnum):
    GENERIC = 100
    ARGUMENT = 101
    FILE_ACCESS = 102
    EMPTY_FILE = 103
    INSUFFICIENT_MAGNITUDE = 104
    DOMAIN = 105


class EnumpressError(Exception):
    code: int = ErrorCode.GENERIC

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.context: Dict[str, Any] = dict(context) if context else {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"code": int(self.code), "message": str(self)}
        if self.context:
            out["context"] = self.context
        return out


class ArgumentError(EnumpressError):
    """Malformed command line: unknown flag, bad integer, missing or extra filename."""

    code = ErrorCode.ARGUMENT


class FileAccessError(EnumpressError, OSError):
    """The target file could not be opened, fully read or fully written."""

    code = ErrorCode.FILE_ACCESS

    def __init__(self, path: str, *, operation: str) -> None:
        super().__init__(
            f"Unable to access file: {path}",
            context={"path": path, "operation": operation},
        )
        self.path = path
        self.operation = operation


class EmptyFileError(EnumpressError):
    code = ErrorCode.EMPTY_FILE

    def __init__(self) -> None:
        super().__init__("Cannot compress a zero-length file.")


class InsufficientMagnitudeError(EnumpressError):
    """The requested shift is larger than the encoded number of the file.

    ``max_safe_count`` is the number of single compress steps that would still
    succeed; it equals the current encoded number, and taking exactly that
    many steps produces a zero-length file.
    """

    code = ErrorCode.INSUFFICIENT_MAGNITUDE

    def __init__(self, max_safe_count: int, requested: int) -> None:
        super().__init__(
            "Cannot compress that much.",
            context={"max_safe_count": max_safe_count, "requested": requested},
        )
        self.max_safe_count = max_safe_count
        self.requested = requested

    def __str__(self) -> str:
        # rendered on demand; the count can be far past the int-to-str digit cap
        return (
            f"{self.message}\n"
            f"Hint: compressing {format_decimal(self.max_safe_count)} time(s) "
            "will make a zero-length file."
        )


class DomainError(EnumpressError, ValueError):
    """A number outside the natural numbers reached the decoder."""

    code = ErrorCode.DOMAIN


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "ErrorCode",
    "EnumpressError",
    "ArgumentError",
    "FileAccessError",
    "EmptyFileError",
    "InsufficientMagnitudeError",
    "DomainError",
]
