"""Manages physical part files on disk: path derivation, writes and listing."""

import re
from pathlib import Path
from typing import Optional, Union

from splitter.exceptions import PartWriteError


def get_part_path(directory: Union[str, Path], name: str) -> Path:
    """
    Get file path for a part.

    Args:
        directory: Directory holding the parts
        name: Part file name as built by part_naming.part_name

    Returns:
        Path object for part file
    """
    return Path(directory) / name


def write_part(path: Path, data: bytes) -> int:
    """
    Write part data to disk, truncating any existing file.

    Args:
        path: Destination path of the part
        data: Raw chunk bytes (bytes, bytearray or memoryview)

    Returns:
        Number of bytes written

    Raises:
        PartWriteError: If the part cannot be created or fully written
    """
    try:
        with open(path, 'wb') as f:
            written = f.write(data)
    except OSError as e:
        raise PartWriteError(f"Failed to write part {path}: {e}") from e

    expected = len(memoryview(data))
    if written != expected:
        raise PartWriteError(f"Short write to {path}: {written} of {expected} bytes")
    return written


def list_parts(directory: Union[str, Path], base_name: str, width: Optional[int] = None) -> list[Path]:
    """
    List part files of a source in a directory.

    Without a width, parts of every width are listed, including leftovers of
    earlier runs with a different part count (e.g. "data.bin.0" next to
    "data.bin.00"); sorting such a mixed listing does not give index order.

    Args:
        directory: Directory to scan
        base_name: File name of the source the parts were split from
        width: Exact number of index digits to match, or None for any

    Returns:
        Part paths sorted by name, which is index order when width is given
    """
    directory = Path(directory)
    if not directory.exists():
        return []

    digits = rf"\d{{{width}}}" if width is not None else r"\d+"
    pattern = re.compile(rf"{re.escape(base_name)}\.{digits}")
    return sorted(
        path for path in directory.iterdir()
        if path.is_file() and pattern.fullmatch(path.name)
    )
