# topmark:header:start
#
#   project      : KVConf
#   file         : sizes.py
#   file_relpath : src/kvconf/coercion/sizes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte sizes with binary (base-1024) unit suffixes.

`FileSize` is the reference implementation of the
[`ConfigDecodable`][kvconf.coercion.types.ConfigDecodable] capability: it parses
values such as ``"10MB"``, ``"512 kb"`` or ``"1024"`` and renders them back in a
human-readable form via `humanize_size`.
"""

from __future__ import annotations

import re
from typing import Final

from kvconf.coercion.types import UINT_MAX

KILOBYTE: Final[int] = 1 << 10
MEGABYTE: Final[int] = 1 << 20
GIGABYTE: Final[int] = 1 << 30
TERABYTE: Final[int] = 1 << 40

_SUFFIX_MULTIPLIERS: Final[dict[str, int]] = {
    "": 1,
    "k": KILOBYTE,
    "m": MEGABYTE,
    "g": GIGABYTE,
    "t": TERABYTE,
}

# Largest unit first; used by `humanize_size`.
_DISPLAY_UNITS: Final[tuple[tuple[int, str], ...]] = (
    (TERABYTE, "TB"),
    (GIGABYTE, "GB"),
    (MEGABYTE, "MB"),
    (KILOBYTE, "KB"),
)

_SIZE_RE: re.Pattern[str] = re.compile(r"(?P<num>[0-9]+)\s*(?P<suffix>[kmgt]?)b?", re.IGNORECASE)


class FileSize(int):
    """A size in bytes, decodable from strings with ``K``/``M``/``G``/``T`` suffixes."""

    @classmethod
    def decode(cls, raw: str) -> FileSize:
        """Parse a byte size.

        The magnitude is a base-10 unsigned integer. It may be followed by a
        suffix ``K``, ``M``, ``G`` or ``T`` (×1024, ×1024², ×1024³, ×1024⁴),
        optionally followed by ``B``; matching is case-insensitive. An empty
        string decodes to zero bytes.

        Args:
            raw (str): The raw config value.

        Returns:
            FileSize: The size in bytes.

        Raises:
            ValueError: If ``raw`` is not a valid size or exceeds 64 bits.
        """
        value: str = raw.strip()
        if not value:
            return cls(0)

        match = _SIZE_RE.fullmatch(value)
        if match is None:
            raise ValueError(f"invalid size {raw!r}")

        size: int = int(match.group("num")) * _SUFFIX_MULTIPLIERS[match.group("suffix").lower()]
        if size > UINT_MAX:
            raise ValueError(f"size {raw!r} out of range")
        return cls(size)

    def humanize(self) -> str:
        """Return the human-readable form of this size (see `humanize_size`)."""
        return humanize_size(self)

    def __repr__(self) -> str:
        return f"FileSize({int(self)})"


def humanize_size(size: int) -> str:
    """Render a byte count using the largest binary unit not exceeding it.

    Zero renders as ``"0"``. Byte counts below 1 KB render without decimals
    (``"512 B"``); larger values render with one decimal, rounded up to the
    next tenth (``6680`` → ``"6.6 KB"``).

    Args:
        size (int): Non-negative number of bytes.

    Returns:
        str: The rendered size.
    """
    if size == 0:
        return "0"

    for unit, label in _DISPLAY_UNITS:
        if size >= unit:
            # Ceiling division in tenths of the unit keeps the result exact.
            tenths: int = -(-size * 10 // unit)
            return f"{tenths // 10}.{tenths % 10} {label}"

    return f"{size} B"
