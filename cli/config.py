"""Configuration management for the chunksplit CLI."""

import json
import os
import shutil
from pathlib import Path
from typing import Any, Optional

from common.constants import CHUNK_SIZE_ENV, DEFAULT_CHUNK_SIZE, DEFAULT_CONFIG_PATH, LOG_LEVEL_ENV
from common.logging_config import get_logger

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file.

    Precedence is defaults < config file < environment; command-line flags
    are applied on top by the parser. Environment values are never written
    back to the file.
    """

    DEFAULT_CONFIG = {
        "chunk_size": DEFAULT_CHUNK_SIZE,
        "verify": True,
        "log_level": "INFO",
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (defaults to ~/.chunksplit/config.json)
        """
        self.config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
        self.data = self._load()
        self.env_overrides = self._read_env()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level value must be an object")
            except (json.JSONDecodeError, ValueError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Config {self.config_path} is corrupted ({e}); backing up to {backup_path}")
                shutil.copy(self.config_path, backup_path)
                return self.DEFAULT_CONFIG.copy()
            config = self.DEFAULT_CONFIG.copy()
            config.update(data)
            return config

        config = self.DEFAULT_CONFIG.copy()
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not write default config to {self.config_path}: {e}")
        return config

    def _read_env(self) -> dict:
        """
        Collect overrides from environment variables.

        Returns:
            Mapping of config keys to raw environment values
        """
        overrides: dict[str, Any] = {}
        chunk_size = os.environ.get(CHUNK_SIZE_ENV)
        if chunk_size is not None:
            try:
                overrides['chunk_size'] = int(chunk_size)
            except ValueError:
                overrides['chunk_size'] = chunk_size
        log_level = os.environ.get(LOG_LEVEL_ENV)
        if log_level is not None:
            overrides['log_level'] = log_level
        return overrides

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get the effective value of a config key.

        Args:
            key: Config key
            default: Value returned when the key is unset everywhere

        Returns:
            Environment override if present, else the file or default value
        """
        if key in self.env_overrides:
            return self.env_overrides[key]
        return self.data.get(key, default)

    def get_chunk_size(self) -> Any:
        """
        Get default chunk size in bytes.

        Returns:
            Chunk size used when none is given on the command line; validated by SplitCommand
        """
        return self.get('chunk_size', DEFAULT_CHUNK_SIZE)

    def get_verify(self) -> Any:
        """
        Whether parts are checksummed after being written.

        Returns:
            Raw configured value; SplitCommand coerces "false"/0 or rejects junk
        """
        return self.get('verify', True)

    def get_log_level(self) -> str:
        """
        Get log level name.

        Returns:
            Log level string (e.g., "INFO")
        """
        return str(self.get('log_level', 'INFO')).upper()
