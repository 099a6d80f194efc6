"""Command request data types for CLI."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SplitCommand(BaseModel):
    """Split a file into part files, optionally comparing against a reference directory."""

    model_config = ConfigDict(frozen=True)

    file_path: Path
    chunk_size: int = Field(gt=0)
    compare_dir: Optional[Path] = None
    verify: bool = True
    command: Literal["split"] = "split"
