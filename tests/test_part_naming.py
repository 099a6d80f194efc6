"""Tests for part file naming."""

import pytest

from splitter.part_naming import calculate_num_chunks, count_digits, part_name


@pytest.mark.parametrize('file_size,chunk_size,expected', [
    (0, 10, 0),
    (1, 10, 1),
    (10, 10, 1),
    (11, 10, 2),
    (2048, 2048, 1),
    (2049, 2048, 2),
    (2 ** 64 - 1, 1, 2 ** 64 - 1),
])
def test_calculate_num_chunks(file_size, chunk_size, expected):
    """Test ceiling division of file size by chunk size."""
    assert calculate_num_chunks(file_size, chunk_size) == expected


@pytest.mark.parametrize('num,expected', [
    (0, 0),
    (1, 1),
    (9, 1),
    (10, 2),
    (99, 2),
    (100, 3),
    (1000, 4),
    (18446744073709551615, 20),
])
def test_count_digits(num, expected):
    """Test decimal digit count."""
    assert count_digits(num) == expected


def test_part_name_single_digit():
    """Test names when fewer than ten parts are produced."""
    assert part_name('data.bin', 0, 10, 95) == 'data.bin.0'
    assert part_name('data.bin', 9, 10, 95) == 'data.bin.9'


def test_part_name_width_follows_chunk_count():
    """Test padding width across the 10, 100 and 1000 chunk boundaries."""
    assert part_name('f', 0, 1, 9) == 'f.0'
    assert part_name('f', 0, 1, 10) == 'f.00'
    assert part_name('f', 0, 1, 99) == 'f.00'
    assert part_name('f', 0, 1, 100) == 'f.000'
    assert part_name('f', 0, 1, 1000) == 'f.0000'
    assert part_name('f', 999, 1, 1000) == 'f.0999'
    assert part_name('f', 1000, 1, 1001) == 'f.1000'


def test_part_name_partial_last_chunk_widens():
    """Test that a remainder chunk counts toward the width."""
    assert part_name('f', 0, 10, 100) == 'f.00'
    assert part_name('f', 0, 10, 1000) == 'f.000'
    assert part_name('f', 0, 10, 1001) == 'f.0000'


@pytest.mark.parametrize('num_chunks', [9, 10, 11, 99, 100, 101, 999, 1000, 1001, 10001])
def test_part_names_sort_in_index_order(num_chunks):
    """Test lexicographic order of names matches numeric order."""
    names = [part_name('archive.tar', i, 1, num_chunks) for i in range(num_chunks)]
    assert sorted(names) == names
    assert len({len(name) for name in names}) == 1
