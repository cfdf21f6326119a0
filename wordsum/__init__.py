"""wordsum - additive 8/16/32-bit checksums of text files."""

__version__ = "0.1.0"

from .checksum import (
    PADDING_BYTE,
    ChecksumWidth,
    checksum8,
    checksum16,
    checksum32,
    compute_checksum,
    pad,
)
from .config import Config, load_config
from .errors import AllocationError, ChecksumError, FileOpenError, InvalidWidthError, UsageError

__all__ = [
    "PADDING_BYTE",
    "ChecksumWidth",
    "checksum8",
    "checksum16",
    "checksum32",
    "compute_checksum",
    "pad",
    "Config",
    "load_config",
    "ChecksumError",
    "UsageError",
    "InvalidWidthError",
    "FileOpenError",
    "AllocationError",
]
