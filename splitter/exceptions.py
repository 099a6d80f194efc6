"""Custom exception classes for the splitter."""

from pathlib import Path


class SplitterError(Exception):
    """
    Base exception class for all splitter errors.
    """
    pass


class ConfigurationError(SplitterError):
    """
    Raised when split parameters are invalid (e.g., a non-positive chunk size).
    """
    pass


class SourceOpenError(SplitterError):
    """
    Raised when the source file cannot be opened for reading.
    """
    pass


class ChunkReadError(SplitterError):
    """
    Raised when reading a chunk from the source file fails mid-stream.
    """
    pass


class PartWriteError(SplitterError):
    """
    Raised when a part file cannot be created or written.
    """
    pass


class ReferenceReadError(SplitterError):
    """
    Raised when a part in the reference directory cannot be read.
    """
    pass


class ChecksumMismatchError(SplitterError):
    """
    Raised when a part's checksum differs from its reference part.
    """

    def __init__(self, part_path: Path, part_checksum: int, reference_path: Path, reference_checksum: int):
        self.part_path = part_path
        self.part_checksum = part_checksum
        self.reference_path = reference_path
        self.reference_checksum = reference_checksum
        super().__init__(
            f"CRC comparison failed: {part_path} crc = 0x{part_checksum:08X}; "
            f"{reference_path} crc = 0x{reference_checksum:08X}"
        )
