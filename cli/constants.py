"""CLI constants and configuration."""

PROG_NAME = "chunksplit"

DESCRIPTION = (
    "Split a file into fixed-size part files named <file>.<index> next to it, "
    "verifying each part with CRC32."
)

EPILOG = """Examples:
  chunksplit -f backup.tar
  chunksplit -f backup.tar --chunk-size 1048576
  chunksplit -f backup.tar --chunk-size 1048576 --compare-dir /mnt/previous-run"""

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
