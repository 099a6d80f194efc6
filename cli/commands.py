"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Callable, Optional

from common.logging_config import get_logger
from common.types import PartRecord, SplitResult
from cli.models import SplitCommand
from splitter.part_storage import list_parts
from splitter.splitter import split_file

logger = get_logger(__name__)


def find_stale_parts(result: SplitResult) -> list[Path]:
    """
    Find part files next to the source that this split did not write.

    Leftovers from an earlier run (a different part count or chunk size)
    would corrupt a later concatenation of "<name>.*".

    Args:
        result: SplitResult of a completed split

    Returns:
        Sorted paths of part files not produced by this split
    """
    written = {record.path for record in result.parts}
    return [
        path for path in list_parts(result.source.parent, result.source.name)
        if path not in written
    ]


def handle_split(
    cmd: SplitCommand,
    splitter: Callable[..., SplitResult] = split_file,
    on_part: Optional[Callable[[PartRecord], None]] = None
) -> SplitResult:
    """
    Handle the 'split' command.

    Args:
        cmd: SplitCommand with file path, chunk size and optional compare dir
        splitter: Split implementation, injectable for testing
        on_part: Optional per-part callback forwarded to the splitter

    Returns:
        SplitResult of the completed split
    """
    if cmd.compare_dir is not None:
        logger.debug(f"Comparing parts against {cmd.compare_dir}")
    result = splitter(
        cmd.file_path,
        chunk_size=cmd.chunk_size,
        compare_dir=cmd.compare_dir,
        verify=cmd.verify,
        on_part=on_part,
    )

    stale = find_stale_parts(result)
    if stale:
        logger.warning(
            f"{len(stale)} part file(s) from an earlier run remain next to {result.source}: "
            + ", ".join(path.name for path in stale)
        )
    return result
