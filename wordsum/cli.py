"""Command-line interface definition."""

import argparse
import re
from pathlib import Path

from .checksum import ChecksumWidth
from .errors import InvalidWidthError, UsageError

# Leading integer, as accepted by C atoi()
_ATOI_PATTERN = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


class ChecksumArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""

    parser = ChecksumArgumentParser(
        prog="wordsum",
        description="Compute an 8, 16 or 32 bit additive checksum of a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 8-bit checksum
  wordsum input.txt 8

  # 32-bit checksum, summary line only
  wordsum input.txt 32 -q

  # Use config file, override line length
  wordsum -c wordsum.toml -l 64 input.txt 16

Padding:
  16-bit input is padded with 'X' to an even length,
  32-bit input is padded with 'X' to a multiple of 4.
""",
    )

    parser.add_argument(
        "filename",
        type=Path,
        help="Text file to checksum",
    )

    parser.add_argument(
        "width",
        metavar="8|16|32",
        help="Checksum size in bits",
    )

    # Config file
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="TOML configuration file",
    )

    parser.add_argument(
        "-l",
        "--line-length",
        type=int,
        metavar="N",
        help="Characters per echoed line (default: 80)",
    )

    parser.add_argument(
        "-m",
        "--max-chars",
        type=int,
        metavar="N",
        help="Maximum number of characters read from the file, 0 for no limit (default: 1023)",
    )

    # Verbosity
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print diagnostics to stderr",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print only the checksum line",
    )

    return parser


def parse_width(value: str) -> ChecksumWidth:
    """
    Convert a width argument to a ChecksumWidth.

    Raises:
        InvalidWidthError: If value is not 8, 16 or 32
    """
    match = _ATOI_PATTERN.match(value)
    number = int(match.group(1)) if match else 0

    try:
        return ChecksumWidth(number)
    except ValueError:
        raise InvalidWidthError(value) from None


def validate_args(args: argparse.Namespace) -> None:
    """
    Validate parsed arguments.

    Converts args.width to a ChecksumWidth in place.

    Raises:
        InvalidWidthError: If the width is not supported
        UsageError: On other validation errors
    """
    args.width = parse_width(args.width)

    if args.line_length is not None and args.line_length < 1:
        raise UsageError(f"Line length must be at least 1, got {args.line_length}")

    if args.max_chars is not None and args.max_chars < 0:
        raise UsageError(f"Max chars must be 0 or greater, got {args.max_chars}")
