# topmark:header:start
#
#   project      : KVConf
#   file         : engine.py
#   file_relpath : src/kvconf/coercion/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Convert raw configuration strings into typed field values.

A `Coercer` is selected once per field type by `coercer_for` (this is where the
custom-decode capability is detected) and then applied to raw strings by
`coerce_with`. Dispatch order:

1. ``UInt``: base-10 unsigned integer;
2. classes with a ``decode`` classmethod (see `ConfigDecodable`): raw string handed over verbatim;
3. ``bool``: ``yes``/``no`` in any capitalization, else the boolean literal rule;
4. ``int``: duration expression (nanosecond count) first, else base-10 signed integer;
5. ``float``: base-10 floating-point literal;
6. ``str``: stored verbatim;
7. ``datetime.timedelta``: duration expression.

Steps 3-7 match on the primitive kind: a subclass such as an ``IntEnum`` or
``class Port(int)`` is parsed like ``int`` and then built with its own
constructor. ``Optional[T]`` (``T | None``) is unwrapped to ``T``. Any other
type has no coercer; `coercer_for` returns None for it.
"""

from __future__ import annotations

import re
import types
from collections.abc import Callable
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Final, Union, get_args, get_origin

from kvconf.coercion.durations import parse_duration, parse_timedelta
from kvconf.coercion.types import INT_MAX, INT_MIN, UINT_MAX, UInt, is_decodable
from kvconf.config.logging import get_logger
from kvconf.errors import CoercionError

if TYPE_CHECKING:
    from kvconf.config.logging import KvconfLogger

logger: KvconfLogger = get_logger(__name__)

# A coercer turns one raw string into a typed value, raising ValueError on bad input.
Coercer = Callable[[str], Any]

_SIGNED_RE: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE: re.Pattern[str] = re.compile(r"[0-9]+")

_TRUE_LITERALS: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(raw: str) -> bool:
    """Parse a boolean: ``yes``/``no`` (any case) or a standard boolean literal."""
    lowered: str = raw.lower()
    if lowered == "yes":
        return True
    if lowered == "no":
        return False
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean {raw!r}")


def parse_signed(raw: str) -> int:
    """Parse a base-10 signed 64-bit integer (no whitespace, no digit separators)."""
    if not _SIGNED_RE.fullmatch(raw):
        raise ValueError(f"invalid integer {raw!r}")
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer {raw!r} out of range")
    return value


def parse_int(raw: str) -> int:
    """Parse an ``int`` field: a duration's nanosecond count, else a signed integer."""
    try:
        return parse_duration(raw)
    except ValueError:
        return parse_signed(raw)


def parse_unsigned(raw: str) -> int:
    """Parse a base-10 unsigned 64-bit integer."""
    if not _UNSIGNED_RE.fullmatch(raw):
        raise ValueError(f"invalid unsigned integer {raw!r}")
    value = int(raw)
    if value > UINT_MAX:
        raise ValueError(f"unsigned integer {raw!r} out of range")
    return value


def parse_float(raw: str) -> float:
    """Parse a base-10 floating-point literal."""
    # float() tolerates surrounding whitespace and digit separators; the file format does not.
    if raw != raw.strip() or "_" in raw:
        raise ValueError(f"invalid float {raw!r}")
    return float(raw)


def _verbatim(raw: str) -> str:
    return raw


# Primitive kinds in dispatch order; `bool` precedes `int` because it subclasses it.
_KIND_COERCERS: Final[tuple[tuple[type, Coercer], ...]] = (
    (bool, parse_bool),
    (int, parse_int),
    (float, parse_float),
    (str, _verbatim),
    (timedelta, parse_timedelta),
)


def unwrap_optional(tp: object) -> object:
    """Return ``T`` for ``Optional[T]`` / ``T | None``; return ``tp`` unchanged otherwise."""
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return tp


def _construct(tp: type, coercer: Coercer) -> Coercer:
    """Wrap ``coercer`` so its result is converted to the subclass ``tp``."""

    def _coerce(raw: str) -> Any:
        value = coercer(raw)
        if isinstance(value, timedelta):
            return tp(days=value.days, seconds=value.seconds, microseconds=value.microseconds)
        return tp(value)

    return _coerce


def coercer_for(tp: object) -> Coercer | None:
    """Select the coercer for a field type.

    Subclasses of the primitive kinds without their own ``decode`` (an
    ``IntEnum``, ``class Port(int)``) are parsed like their kind and the
    result is passed to the subclass constructor.

    Args:
        tp (object): The resolved type hint of the field.

    Returns:
        Coercer | None: The coercer, or None if the type is not supported.
    """
    tp = unwrap_optional(tp)
    if tp is UInt:
        return parse_unsigned
    # Parameterized generics such as list[str] are not classes.
    if get_origin(tp) is not None or not isinstance(tp, type):
        return None
    if is_decodable(tp):
        return tp.decode
    for kind, coercer in _KIND_COERCERS:
        if tp is kind:
            return coercer
        if issubclass(tp, kind):
            return _construct(tp, coercer)
    return None


def coerce_with(coercer: Coercer, key: str, raw: str) -> Any:
    """Apply ``coercer`` to ``raw``, reporting failures against ``key``.

    Raises:
        CoercionError: If the coercer rejects the value with `ValueError` or `LookupError`.
    """
    try:
        value = coercer(raw)
    except (ValueError, LookupError) as exc:
        raise CoercionError(key, raw, exc) from exc
    logger.trace("Coerced [%s] = %r -> %r", key, raw, value)
    return value


def coerce(tp: object, key: str, raw: str) -> Any:
    """Coerce ``raw`` to type ``tp`` in one step.

    Raises:
        CoercionError: If ``tp`` is unsupported or ``raw`` does not parse.
    """
    coercer: Coercer | None = coercer_for(tp)
    if coercer is None:
        raise CoercionError(key, raw, f"unsupported field type {tp!r}")
    return coerce_with(coercer, key, raw)
