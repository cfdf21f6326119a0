"""Additive 8/16/32-bit checksums over padded byte sequences."""

from enum import IntEnum
from typing import Union

# Filler used to align 16/32-bit input to a whole number of words
PADDING_BYTE = b"X"


class ChecksumWidth(IntEnum):
    """Supported checksum sizes in bits."""

    BITS_8 = 8
    BITS_16 = 16
    BITS_32 = 32

    @property
    def word_size(self) -> int:
        """Number of bytes summed as one word."""
        return self.value // 8

    @property
    def mask(self) -> int:
        return (1 << self.value) - 1


def pad(data: bytes, width: Union[int, ChecksumWidth]) -> bytes:
    """
    Append PADDING_BYTE until data is a whole number of words.

    The original bytes are never modified; 8-bit input and input that is
    already aligned come back unchanged.

    Args:
        data: Input bytes
        width: Checksum width (8, 16 or 32)

    Returns:
        Padded copy of data
    """
    word_size = ChecksumWidth(width).word_size
    shortfall = -len(data) % word_size
    return bytes(data) + PADDING_BYTE * shortfall


def _sum_words(data: bytes, width: ChecksumWidth) -> int:
    padded = pad(data, width)
    word_size = width.word_size

    total = 0
    for i in range(0, len(padded), word_size):
        word = 0
        for byte in padded[i : i + word_size]:
            word = (word << 8) | byte
        total += word

    return total & width.mask


def checksum8(data: bytes) -> int:
    """Sum of all byte values, modulo 256."""
    return sum(bytes(data)) & 0xFF


def checksum16(data: bytes) -> int:
    """
    Sum of big-endian 16-bit words, modulo 2**16.

    Odd-length input gets one PADDING_BYTE as the final low byte.
    """
    return _sum_words(data, ChecksumWidth.BITS_16)


def checksum32(data: bytes) -> int:
    """
    Sum of big-endian 32-bit words, modulo 2**32.

    Input is padded with PADDING_BYTE to a multiple of four bytes.
    """
    return _sum_words(data, ChecksumWidth.BITS_32)


_CALCULATORS = {
    ChecksumWidth.BITS_8: checksum8,
    ChecksumWidth.BITS_16: checksum16,
    ChecksumWidth.BITS_32: checksum32,
}


def compute_checksum(data: bytes, width: Union[int, ChecksumWidth]) -> int:
    """
    Compute the checksum of data for the given width.

    Raises:
        ValueError: If width is not 8, 16 or 32
    """
    return _CALCULATORS[ChecksumWidth(width)](data)
