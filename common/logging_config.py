import logging
import os
import sys
from typing import Optional

from common.constants import COMPONENT_NAME


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FORMAT_WITH_RUN_ID = '%(asctime)s - %(name)s - %(levelname)s - [{run_id}] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_formatter(run_id: Optional[str] = None) -> logging.Formatter:
    """Build the shared log formatter, optionally tagged with a run ID."""
    if run_id:
        return logging.Formatter(LOG_FORMAT_WITH_RUN_ID.format(run_id=run_id), datefmt=DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    component_name: str = COMPONENT_NAME,
    log_level: Optional[str] = None,
    run_id: Optional[str] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the root logger for the component (default 'chunksplit')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO
        run_id: Optional run ID to include in log format

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        if run_id:
            set_run_id(logger, run_id)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(run_id))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger nested under the component logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance whose records reach the handlers set up by setup_logging
    """
    if name == COMPONENT_NAME or name.startswith(f'{COMPONENT_NAME}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{COMPONENT_NAME}.{name}')


def set_run_id(logger: logging.Logger, run_id: str) -> None:
    """
    Update logger handlers to include a run ID in format.

    Args:
        logger: Logger instance to update
        run_id: Run ID to include
    """
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setFormatter(_build_formatter(run_id))
