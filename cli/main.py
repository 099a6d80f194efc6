"""CLI entry point."""

import sys
import uuid
from typing import Optional, Sequence

from common.logging_config import setup_logging
from cli.commands import handle_split
from cli.config import Config
from cli.constants import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from cli.parser import ParseError, build_command, parse_args
from cli.utils import summarize
from splitter.exceptions import SplitterError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for CLI.

    Returns:
        Process exit status: 0 on success, 1 on a split failure, 2 on bad arguments
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
        config = Config(args.config)
        cmd = build_command(args, config)
    except ParseError as e:
        logger = setup_logging()
        logger.error(f"Error: {e}")
        return EXIT_USAGE

    log_level = 'DEBUG' if args.debug else config.get_log_level()
    logger = setup_logging(log_level=log_level, run_id=uuid.uuid4().hex[:8])

    if args.debug:
        logger.debug("Debug logging enabled")

    try:
        result = handle_split(cmd)
    except SplitterError as e:
        logger.error(f"Split failed: {e}")
        return EXIT_FAILURE

    logger.info(summarize(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
