"""File splitting with CRC32 verification."""

from splitter.crc32 import IncrementalCrc32, crc32, crc32_file
from splitter.part_naming import part_name
from splitter.splitter import split_file

__all__ = [
    "IncrementalCrc32",
    "crc32",
    "crc32_file",
    "part_name",
    "split_file",
]
