"""Splits a source file into fixed-size part files with optional CRC32 checks."""

import os
from pathlib import Path
from typing import Callable, Optional, Union

from common.constants import DEFAULT_CHUNK_SIZE
from common.logging_config import get_logger
from common.types import PartRecord, SplitResult
from splitter.crc32 import crc32_file, format_checksum
from splitter.exceptions import (
    ChecksumMismatchError,
    ChunkReadError,
    ConfigurationError,
    PartWriteError,
    ReferenceReadError,
    SourceOpenError,
)
from splitter.part_naming import part_name
from splitter.part_storage import get_part_path, write_part

logger = get_logger(__name__)

PartCallback = Callable[[PartRecord], None]


def validate_chunk_size(chunk_size: int) -> None:
    """
    Reject chunk sizes that cannot drive a split.

    Raises:
        ConfigurationError: If chunk_size is not a positive integer
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise ConfigurationError(f"Chunk size must be an integer, got {type(chunk_size).__name__}")
    if chunk_size <= 0:
        raise ConfigurationError(f"Chunk size must be positive, got {chunk_size}")


def _read_chunk(source, view: memoryview) -> int:
    """Fill view from source, stopping early only at end of file."""
    filled = 0
    while filled < len(view):
        num_bytes = source.readinto(view[filled:])
        if not num_bytes:
            break
        filled += num_bytes
    return filled


def _reference_checksum(reference_path: Path) -> int:
    try:
        return crc32_file(reference_path)
    except OSError as e:
        raise ReferenceReadError(f"Failed to read reference part {reference_path}: {e}") from e


def _part_checksum(path: Path) -> int:
    try:
        return crc32_file(path)
    except OSError as e:
        raise PartWriteError(f"Failed to read back part {path}: {e}") from e


def process_chunk(
    data: memoryview,
    part_index: int,
    part_path: Path,
    verify: bool = True,
    reference_path: Optional[Path] = None
) -> PartRecord:
    """
    Write one chunk to its part file and check it.

    The checksum is computed from the part re-read from disk, so it covers
    the write path and not just the in-memory buffer.

    Args:
        data: Valid bytes of the chunk
        part_index: Zero-based index of the part
        part_path: Destination of the part file
        verify: Compute the CRC32 of the written part
        reference_path: Part of the same name in a reference directory

    Returns:
        PartRecord describing the written part

    Raises:
        PartWriteError: If the part cannot be written or read back
        ReferenceReadError: If the reference part cannot be read
        ChecksumMismatchError: If the part and its reference differ
    """
    size = write_part(part_path, data)

    checksum = None
    if verify or reference_path is not None:
        checksum = _part_checksum(part_path)

    if reference_path is not None:
        reference_checksum = _reference_checksum(reference_path)
        if checksum != reference_checksum:
            raise ChecksumMismatchError(part_path, checksum, reference_path, reference_checksum)

    return PartRecord(
        part_index=part_index,
        path=part_path,
        size=size,
        checksum=checksum,
        reference_path=reference_path,
    )


def _log_part(record: PartRecord) -> None:
    if record.checksum is None:
        logger.info(f"Processing chunk #: {record.path} -- size: {record.size} (bytes)")
    else:
        logger.info(
            f"Processing chunk #: {record.path} -- size: {record.size} (bytes) "
            f"-- crc32 = {format_checksum(record.checksum)}"
        )


def split_file(
    source_path: Union[str, Path],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    compare_dir: Optional[Union[str, Path]] = None,
    verify: bool = True,
    on_part: Optional[PartCallback] = None
) -> SplitResult:
    """
    Split a file into sequential part files next to it.

    Parts are named "<name>.<index>" with the index zero-padded to the
    width of the total part count. Processing stops at the first error;
    parts written before it are left on disk.

    Args:
        source_path: File to split
        chunk_size: Bytes per part (the last part may be shorter)
        compare_dir: Directory of previously produced parts to compare against
        verify: Compute the CRC32 of each written part
        on_part: Called with each PartRecord right after the part is processed

    Returns:
        SplitResult listing every part written

    Raises:
        ConfigurationError: If chunk_size is not a positive integer
        SourceOpenError: If the source cannot be opened
        ChunkReadError: If reading the source fails mid-stream
        PartWriteError: If a part cannot be written
        ReferenceReadError: If a reference part cannot be read
        ChecksumMismatchError: If a part differs from its reference
    """
    validate_chunk_size(chunk_size)

    source_path = Path(source_path)
    compare_dir = Path(compare_dir) if compare_dir is not None else None
    logger.info(f"filename: {source_path}\t chunk_size: {chunk_size}")

    try:
        source = open(source_path, 'rb')
    except OSError as e:
        raise SourceOpenError(f"Failed to open {source_path}: {e}") from e

    parts = []
    with source:
        try:
            file_size = os.fstat(source.fileno()).st_size
        except OSError as e:
            raise SourceOpenError(f"Failed to query size of {source_path}: {e}") from e

        base_name = source_path.name
        parent_dir = source_path.parent
        buffer = bytearray(chunk_size)
        view = memoryview(buffer)
        part_index = 0

        while True:
            try:
                num_bytes = _read_chunk(source, view)
            except OSError as e:
                raise ChunkReadError(f"Failed to read chunk {part_index} of {source_path}: {e}") from e
            if not num_bytes:
                break

            name = part_name(base_name, part_index, chunk_size, file_size)
            reference_path = get_part_path(compare_dir, name) if compare_dir is not None else None

            record = process_chunk(
                view[:num_bytes],
                part_index,
                get_part_path(parent_dir, name),
                verify=verify,
                reference_path=reference_path,
            )
            _log_part(record)
            parts.append(record)
            if on_part is not None:
                on_part(record)

            part_index += 1

    logger.debug(f"Split {source_path} into {len(parts)} part(s)")
    return SplitResult(
        source=source_path,
        source_size=file_size,
        chunk_size=chunk_size,
        parts=tuple(parts),
    )
