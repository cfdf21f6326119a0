"""Errors reported by the command-line front end."""

from pathlib import Path
from typing import Union


class ChecksumError(Exception):
    """Base class for errors that end the program with a non-zero status."""


class UsageError(ChecksumError):
    """Wrong number of command-line arguments or an unknown option."""


class InvalidWidthError(ChecksumError, ValueError):
    """Checksum width is not 8, 16 or 32."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Valid checksum sizes are 8, 16, or 32 (got {value!r})")


class FileOpenError(ChecksumError):
    """Input file could not be opened for reading."""

    def __init__(self, filename: Union[str, Path], reason: str = ""):
        self.filename = filename
        message = f'Unable to open file "{filename}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AllocationError(ChecksumError):
    """Input buffer could not be allocated."""
