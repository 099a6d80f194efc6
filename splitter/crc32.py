"""Provides CRC32 checksum calculation and verification helpers.

The checksum is computed bit by bit without a lookup table, using the
reversed IEEE 802.3 polynomial, so results match ``zlib.crc32``.
"""

from pathlib import Path
from typing import Union

from common.constants import CRC32_INIT, CRC32_MASK, CRC32_POLYNOMIAL


def _update(crc: int, data: bytes) -> int:
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ CRC32_POLYNOMIAL
            else:
                crc >>= 1
    return crc


def crc32(data: bytes) -> int:
    """
    Compute CRC32 checksum for given data.

    Args:
        data: Bytes (or any bytes-like object) to compute checksum for

    Returns:
        Unsigned 32-bit checksum
    """
    calculator = IncrementalCrc32()
    calculator.update(data)
    return calculator.finalize()


def crc32_file(path: Union[str, Path]) -> int:
    """
    Compute CRC32 checksum of a file's full contents.

    Args:
        path: Path of the file to checksum

    Returns:
        Unsigned 32-bit checksum

    Raises:
        OSError: If the file cannot be opened or read
    """
    return crc32(Path(path).read_bytes())


def format_checksum(value: int) -> str:
    """Render a checksum as a zero-padded hex literal, e.g. 0xCBF43926."""
    return f"0x{value:08X}"


class IncrementalCrc32:
    """
    Calculate CRC32 checksum incrementally for streaming data.

    Usage:
        calculator = IncrementalCrc32()
        calculator.update(chunk1)
        calculator.update(chunk2)
        final_checksum = calculator.finalize()
    """

    def __init__(self):
        """Initialize a new incremental checksum calculator."""
        self._crc = CRC32_INIT
        self._finalized = False

    def update(self, data: bytes) -> None:
        """
        Update checksum with new data.

        Args:
            data: Bytes to add to checksum calculation
        """
        if self._finalized:
            raise ValueError("Cannot update after finalization")
        self._crc = _update(self._crc, memoryview(data).cast('B'))

    def finalize(self) -> int:
        """
        Finalize checksum calculation and return result.

        Returns:
            Unsigned 32-bit checksum
        """
        self._finalized = True
        return (self._crc ^ CRC32_MASK) & CRC32_MASK

    def reset(self) -> None:
        """Reset calculator to initial state."""
        self._crc = CRC32_INIT
        self._finalized = False
