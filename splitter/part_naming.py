"""Derives part file names whose lexicographic order matches index order."""


def calculate_num_chunks(file_size: int, chunk_size: int) -> int:
    """Number of chunks needed to hold file_size bytes (ceiling division)."""
    quotient, remainder = divmod(file_size, chunk_size)
    return quotient + (1 if remainder else 0)


def count_digits(num: int) -> int:
    """Decimal digit count of num; zero has zero digits."""
    count = 0
    while num > 0:
        count += 1
        num //= 10
    return count


def part_name(base_name: str, part_index: int, chunk_size: int, total_file_size: int) -> str:
    """
    Build the name of a part file.

    The index is zero-padded to the digit count of the total chunk count,
    so every name produced for one source file has the same width.

    Args:
        base_name: File name of the source (no directory)
        part_index: Zero-based index of the part
        chunk_size: Chunk size in bytes
        total_file_size: Size of the source file in bytes

    Returns:
        Part name of the form "<base_name>.<padded index>"
    """
    width = count_digits(calculate_num_chunks(total_file_size, chunk_size))
    return f"{base_name}.{part_index:0{width}d}"
