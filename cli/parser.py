"""Command-line argument parser."""

import argparse
from typing import Optional, Sequence

from pydantic import ValidationError

from cli.config import Config
from cli.constants import DESCRIPTION, EPILOG, PROG_NAME
from cli.models import SplitCommand


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ParseError instead of exiting."""

    def error(self, message: str) -> None:
        raise ParseError(message)


def _positive_int(value: str) -> int:
    """argparse type for chunk sizes."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid chunk size: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"chunk size must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the split command."""
    parser = _RaisingArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-f', '--file-path', required=True, help='file to split')
    parser.add_argument(
        '--chunk-size', type=_positive_int, default=None,
        help='bytes per part (default: from config, 2048)',
    )
    parser.add_argument(
        '--compare-dir', default=None,
        help='directory of reference parts; abort on the first CRC mismatch',
    )
    parser.add_argument(
        '--no-verify', dest='verify', action='store_false', default=None,
        help='skip the CRC32 of written parts (ignored with --compare-dir)',
    )
    parser.add_argument('--config', default=None, help='path to config JSON file')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Parsed namespace

    Raises:
        ParseError: If arguments are missing or invalid
    """
    return build_parser().parse_args(argv)


def build_command(args: argparse.Namespace, config: Config) -> SplitCommand:
    """Build a SplitCommand from parsed arguments.

    Values not given on the command line fall back to the config file.

    Raises:
        ParseError: If the resulting command is invalid (e.g. a bad chunk size in config)
    """
    chunk_size = args.chunk_size if args.chunk_size is not None else config.get_chunk_size()
    verify = args.verify if args.verify is not None else config.get_verify()

    try:
        return SplitCommand(
            file_path=args.file_path,
            chunk_size=chunk_size,
            compare_dir=args.compare_dir,
            verify=verify,
        )
    except ValidationError as e:
        raise ParseError(f"Invalid arguments: {e}")
