# topmark:header:start
#
#   project      : KVConf
#   file         : __init__.py
#   file_relpath : src/kvconf/coercion/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type coercion for raw configuration values.

This package groups the string-to-value conversions used when binding a
key/value table onto a record:

- `engine`: coercer selection per field type and error reporting;
- `durations`: duration expressions (``"10m"``, ``"1h30m"``);
- `sizes`: the `FileSize` byte-size type and `humanize_size`;
- `types`: the `ConfigDecodable` capability and the `UInt` marker.
"""

from __future__ import annotations

from .durations import parse_duration, parse_timedelta
from .engine import Coercer, coerce, coerce_with, coercer_for
from .sizes import FileSize, humanize_size
from .types import ConfigDecodable, UInt, is_decodable

__all__: list[str] = [
    "Coercer",
    "ConfigDecodable",
    "FileSize",
    "UInt",
    "coerce",
    "coerce_with",
    "coercer_for",
    "humanize_size",
    "is_decodable",
    "parse_duration",
    "parse_timedelta",
]
