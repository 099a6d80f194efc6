"""Shared data type definitions (PartRecord, SplitResult)."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class PartRecord:
    """
    Progress record for a single part file written by the splitter.
    """
    part_index: int
    path: Path
    size: int
    checksum: Optional[int] = None
    reference_path: Optional[Path] = None


@dataclass(frozen=True)
class SplitResult:
    """
    Outcome of a completed split of one source file.
    """
    source: Path
    source_size: int
    chunk_size: int
    parts: Tuple[PartRecord, ...]

    @property
    def num_parts(self) -> int:
        return len(self.parts)

    @property
    def total_bytes(self) -> int:
        return sum(part.size for part in self.parts)
