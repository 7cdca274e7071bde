# topmark:header:start
#
#   project      : KVConf
#   file         : test_sizes.py
#   file_relpath : tests/coercion/test_sizes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `FileSize` decoding and human-readable rendering."""

from __future__ import annotations

import pytest

from kvconf.coercion.sizes import FileSize, humanize_size
from kvconf.coercion.types import ConfigDecodable


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10MB", 10 * 2**20),
        ("1024", 1024),
        ("", 0),
        ("10mb", 10 * 2**20),
        ("10 MB", 10 * 2**20),
        ("512b", 512),
        ("3K", 3 * 2**10),
        ("3kb", 3 * 2**10),
        ("2GB", 2 * 2**30),
        ("1TB", 2**40),
    ],
)
def test_filesize_decode(raw: str, expected: int) -> None:
    """Suffixes multiply by powers of 1024; no suffix means bytes."""
    size = FileSize.decode(raw)

    assert isinstance(size, FileSize)
    assert size == expected


@pytest.mark.parametrize("raw", ["MB", "-1MB", "1.5MB", "10PB", "10 M B", "ten"])
def test_filesize_decode_rejects_garbage(raw: str) -> None:
    """Invalid magnitudes or suffixes raise ValueError."""
    with pytest.raises(ValueError):
        FileSize.decode(raw)


def test_filesize_decode_out_of_range() -> None:
    """Sizes beyond 64 bits are rejected."""
    with pytest.raises(ValueError, match="out of range"):
        FileSize.decode(f"{2**64}")


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (6680, "6.6 KB"),
        (237797290, "226.8 MB"),
        (10 * 2**20, "10.0 MB"),
        (2**30 + 1, "1.1 GB"),
        (5 * 2**40, "5.0 TB"),
        (2048 * 2**40, "2048.0 TB"),
    ],
)
def test_humanize_size(size: int, expected: str) -> None:
    """Largest unit not exceeding the value; one decimal rounded up above bytes."""
    assert humanize_size(size) == expected
    assert FileSize(size).humanize() == expected


def test_filesize_is_config_decodable() -> None:
    """FileSize satisfies the custom decoding capability."""
    assert isinstance(FileSize(0), ConfigDecodable)
