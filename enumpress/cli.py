import argparse
import sys
from typing import List, Optional

from .errors import EXIT_FAILURE, EXIT_SUCCESS, ArgumentError, EnumpressError
from .logging_config import setup_logging
from .shift import accumulate_shift, parse_shift_literal
from .transform import TransformConfig, transform_file

DESCRIPTION = """\
This program compresses and uncompresses files.
Its compression ratio is very near to no compression
(a fraction of a bit), but it ALWAYS compresses,
so you can ALWAYS get 0-length compressed files.
Experiment with very small files first.
Use repeatedly (billions of times or even more)."""

EPILOG = """\
Examples:
  %(prog)s [-v] -c FILENAME       compress
  %(prog)s      -C 5 FILENAME     compress 5 times
  %(prog)s      -D 5 FILENAME     decompress 5 times
  %(prog)s      -d FILENAME       decompress

Flags accumulate: "-c -c -D 0x10" is a net decompression by 14.
Integers may be written in decimal, hex (0x), binary (0b) or octal (0o or 0)."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise ArgumentError(message)


def _negated_shift_literal(text: str) -> int:
    return -parse_shift_literal(text)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="enumpress",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", dest="verbose", action="store_true", help="debug mode")
    parser.add_argument(
        "-c",
        dest="shift_terms",
        action="append_const",
        const=1,
        help="compress once",
    )
    parser.add_argument(
        "-d",
        dest="shift_terms",
        action="append_const",
        const=-1,
        help="decompress once",
    )
    parser.add_argument(
        "-C",
        dest="shift_terms",
        action="append",
        type=parse_shift_literal,
        metavar="N",
        help="compress N times",
    )
    parser.add_argument(
        "-D",
        dest="shift_terms",
        action="append",
        type=_negated_shift_literal,
        metavar="N",
        help="decompress N times",
    )
    parser.add_argument("filenames", nargs="*", metavar="FILENAME")
    return parser


def _resolve_filename(filenames: List[str]) -> str:
    if not filenames:
        raise ArgumentError("No filename specified.")
    if len(filenames) > 1:
        raise ArgumentError("Too many arguments.")
    return filenames[0]


def build_config(args) -> TransformConfig:
    return TransformConfig(
        shift=accumulate_shift(args.shift_terms or []),
        verbose=args.verbose,
    )


def run_transform(args) -> None:
    filename = _resolve_filename(args.filenames)
    config = build_config(args)
    setup_logging(verbose=config.verbose)
    transform_file(filename, config)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    try:
        args = parser.parse_intermixed_args(argv)
        run_transform(args)
    except EnumpressError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


__all__ = ["build_arg_parser", "build_config", "run_transform", "main"]
