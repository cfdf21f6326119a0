"""Shared utilities for reading input and formatting the report."""

from pathlib import Path
from typing import Union

from .checksum import ChecksumWidth, compute_checksum, pad
from .errors import AllocationError, FileOpenError

DEFAULT_MAX_CHARS = 1023
DEFAULT_LINE_LENGTH = 80


def read_input(path: Union[str, Path], max_chars: int = DEFAULT_MAX_CHARS) -> bytes:
    """
    Read up to max_chars bytes from a file.

    Args:
        path: File to read
        max_chars: Maximum number of bytes to keep (0 for no limit)

    Returns:
        File contents, truncated to max_chars

    Raises:
        FileOpenError: If the file cannot be opened or read
        AllocationError: If the buffer cannot be allocated
    """
    try:
        with open(path, "rb") as f:
            return f.read(max_chars) if max_chars > 0 else f.read()
    except MemoryError as e:
        raise AllocationError("Memory allocation failed") from e
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e


def wrap_lines(data: bytes, line_length: int = DEFAULT_LINE_LENGTH) -> bytes:
    """
    Insert a newline before every line_length-th byte, starting at offset 0.

    Example:
        wrap_lines(b"abcde", 2) == b"\\nab\\ncd\\ne"
    """
    if line_length < 1:
        raise ValueError(f"Line length must be at least 1, got {line_length}")

    return b"".join(b"\n" + data[i : i + line_length] for i in range(0, len(data), line_length))


def format_summary(width: int, checksum: int, count: int) -> str:
    """Return the one-line checksum summary."""
    return f"{width:2d} bit checksum is {checksum:8x} for all {count:4d} chars\n"


def render_report(
    data: bytes,
    width: Union[int, ChecksumWidth],
    line_length: int = DEFAULT_LINE_LENGTH,
    echo_text: bool = True,
) -> bytes:
    """
    Build the full program output for data.

    The padded text is echoed in wrapped lines, followed by the summary.
    The character count reported is the padded length.
    """
    width = ChecksumWidth(width)
    padded = pad(data, width)
    checksum = compute_checksum(padded, width)
    summary = format_summary(int(width), checksum, len(padded)).encode("ascii")

    if not echo_text:
        return summary
    return wrap_lines(padded, line_length) + b"\n" + summary
