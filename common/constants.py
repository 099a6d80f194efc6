"""Project-wide constants (e.g., DEFAULT_CHUNK_SIZE, CRC32 parameters)."""

import os
from pathlib import Path

DEFAULT_CHUNK_SIZE: int = 2048
CHUNK_SIZE_ENV = "CHUNKSPLIT_CHUNK_SIZE"
LOG_LEVEL_ENV = "LOG_LEVEL"

CRC32_POLYNOMIAL: int = 0xEDB88320  # reversed IEEE 802.3 polynomial
CRC32_INIT: int = 0xFFFFFFFF
CRC32_MASK: int = 0xFFFFFFFF

DEFAULT_CONFIG_PATH = Path(
    os.environ.get("CHUNKSPLIT_CONFIG", str(Path.home() / ".chunksplit" / "config.json"))
)

COMPONENT_NAME = "chunksplit"
