"""Shared pytest fixtures for all tests."""

import logging

import pytest

from common.constants import COMPONENT_NAME


@pytest.fixture
def source_dir(tmp_path):
    """
    Create a directory for source files and the parts split from them.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the source directory
    """
    directory = tmp_path / 'source'
    directory.mkdir()
    return directory


@pytest.fixture
def make_source(source_dir):
    """
    Factory fixture writing a source file of deterministic content.

    Args:
        source_dir: Source directory fixture

    Returns:
        Callable (size, name='data.bin') -> Path
    """
    def _make(size: int, name: str = 'data.bin'):
        path = source_dir / name
        path.write_bytes(bytes(i % 251 for i in range(size)))
        return path

    return _make


@pytest.fixture
def reference_dir(tmp_path):
    """
    Create an empty reference directory for comparison runs.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the reference directory
    """
    directory = tmp_path / 'reference'
    directory.mkdir()
    return directory


@pytest.fixture(autouse=True)
def reset_component_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger(COMPONENT_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch):
    """Keep host environment overrides out of config-driven tests."""
    monkeypatch.delenv('CHUNKSPLIT_CHUNK_SIZE', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
