"""Tests for the CRC32 engine."""

import zlib

import pytest

from splitter.crc32 import (
    IncrementalCrc32,
    crc32,
    crc32_file,
    format_checksum,
)


def test_crc32_empty_buffer():
    """Test that the empty input has checksum zero."""
    assert crc32(b'') == 0


def test_crc32_single_byte_buffer():
    """Test checksum of a single ASCII 'a'."""
    assert crc32(b'a') == 3904355907
    assert crc32(b'a') == 0xE8B7BE43


def test_crc32_known_string():
    """Test the standard CRC-32 check value."""
    assert crc32(b'123456789') == 3421780262
    assert crc32(b'123456789') == 0xCBF43926


def test_crc32_is_deterministic():
    """Test that repeated calls on identical input agree."""
    data = bytes(range(256)) * 4
    assert crc32(data) == crc32(data) == crc32(bytes(data))


def test_crc32_matches_zlib():
    """Test agreement with the reference IEEE implementation."""
    for data in (b'\x00', b'\xff' * 17, b'The quick brown fox jumps over the lazy dog', bytes(range(256))):
        assert crc32(data) == zlib.crc32(data) & 0xFFFFFFFF


def test_crc32_accepts_bytes_like():
    """Test bytearray and memoryview inputs."""
    data = bytearray(b'123456789')
    assert crc32(data) == 0xCBF43926
    assert crc32(memoryview(data)[:1]) == crc32(b'1')


def test_crc32_result_is_unsigned_32_bit():
    """Test that results stay within the u32 range."""
    for data in (b'\xff' * 64, b'\x80', b'abc'):
        value = crc32(data)
        assert 0 <= value <= 0xFFFFFFFF


def test_crc32_file(tmp_path):
    """Test checksum computed from a file path."""
    path = tmp_path / 'check.txt'
    path.write_bytes(b'123456789')
    assert crc32_file(path) == 0xCBF43926
    assert crc32_file(str(path)) == 0xCBF43926


def test_crc32_file_missing(tmp_path):
    """Test that an unreadable path raises an OSError."""
    with pytest.raises(OSError):
        crc32_file(tmp_path / 'missing.bin')


def test_format_checksum():
    """Test hex rendering of checksums."""
    assert format_checksum(0xCBF43926) == '0xCBF43926'
    assert format_checksum(0) == '0x00000000'
    assert format_checksum(0xABC) == '0x00000ABC'


def test_incremental_matches_one_shot():
    """Test that piecewise updates equal a single computation."""
    calculator = IncrementalCrc32()
    calculator.update(b'1234')
    calculator.update(b'')
    calculator.update(b'56789')
    assert calculator.finalize() == crc32(b'123456789')


def test_incremental_empty_is_zero():
    """Test finalizing without updates."""
    assert IncrementalCrc32().finalize() == 0


def test_incremental_update_after_finalize_fails():
    """Test that updating a finalized calculator raises."""
    calculator = IncrementalCrc32()
    calculator.update(b'a')
    calculator.finalize()
    with pytest.raises(ValueError):
        calculator.update(b'b')


def test_incremental_reset():
    """Test reset returns the calculator to its initial state."""
    calculator = IncrementalCrc32()
    calculator.update(b'garbage')
    calculator.finalize()
    calculator.reset()
    calculator.update(b'a')
    assert calculator.finalize() == 0xE8B7BE43
