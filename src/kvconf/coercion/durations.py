# topmark:header:start
#
#   project      : KVConf
#   file         : durations.py
#   file_relpath : src/kvconf/coercion/durations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Duration expressions such as ``"10m"``, ``"1h30m"`` or ``"-1.5s"``.

A duration is an optional sign followed by one or more ``<decimal><unit>``
pairs. Valid units are ``ns``, ``us`` (or ``µs``/``μs``), ``ms``, ``s``, ``m``
and ``h``. The bare string ``"0"`` is also accepted. Results are expressed in
nanoseconds and must fit a signed 64-bit integer; fractional nanoseconds are
truncated.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Final

from kvconf.coercion.types import INT_MAX

NANOSECOND: Final[int] = 1
MICROSECOND: Final[int] = 1000 * NANOSECOND
MILLISECOND: Final[int] = 1000 * MICROSECOND
SECOND: Final[int] = 1000 * MILLISECOND
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE

UNITS: Final[dict[str, int]] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 MICRO SIGN
    "μs": MICROSECOND,  # U+03BC GREEK SMALL LETTER MU
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT_RE: re.Pattern[str] = re.compile(r"(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")


def parse_duration(text: str) -> int:
    """Parse a duration expression into a nanosecond count.

    Args:
        text (str): The duration expression, e.g. ``"1h15m30.5s"``.

    Returns:
        int: The signed number of nanoseconds.

    Raises:
        ValueError: If ``text`` is not a valid duration or is out of range.
    """
    s: str = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ValueError(f"invalid duration {text!r}")

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT_RE.match(s, pos)
        # The pattern can match the empty string; an empty match means no progress.
        if match is None or match.end() == pos:
            raise ValueError(f"invalid duration {text!r}")
        int_part: str = match.group("int")
        frac_part: str | None = match.group("frac")
        unit_name: str = match.group("unit")

        if not int_part and not frac_part:
            raise ValueError(f"invalid duration {text!r}")
        if not unit_name:
            raise ValueError(f"missing unit in duration {text!r}")
        unit: int | None = UNITS.get(unit_name)
        if unit is None:
            raise ValueError(f"unknown unit {unit_name!r} in duration {text!r}")

        value: int = int(int_part or "0") * unit
        if frac_part:
            value += int(frac_part) * unit // 10 ** len(frac_part)
        total += value
        if total > INT_MAX + (1 if negative else 0):
            raise ValueError(f"invalid duration {text!r}: out of range")
        pos = match.end()

    return -total if negative else total


def parse_timedelta(text: str) -> timedelta:
    """Parse a duration expression into a `datetime.timedelta`.

    Sub-microsecond precision is truncated toward zero.
    """
    nanos: int = parse_duration(text)
    micros: int = abs(nanos) // MICROSECOND
    return timedelta(microseconds=-micros if nanos < 0 else micros)
