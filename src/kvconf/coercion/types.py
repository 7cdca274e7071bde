# topmark:header:start
#
#   project      : KVConf
#   file         : types.py
#   file_relpath : src/kvconf/coercion/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type markers and capabilities understood by the coercion engine."""

from __future__ import annotations

import inspect
from typing import NewType, Protocol, TypeGuard, runtime_checkable

# Unsigned integer fields: `count: UInt = setting("count", initial=UInt(0))`.
# At runtime values are plain `int`.
UInt = NewType("UInt", int)

# Range limits of the 64-bit integer kinds.
INT_MIN: int = -(1 << 63)
INT_MAX: int = (1 << 63) - 1
UINT_MAX: int = (1 << 64) - 1


@runtime_checkable
class ConfigDecodable(Protocol):
    """Capability of a field type to decode itself from a raw config string.

    A type implementing this protocol receives the raw value verbatim and
    bypasses the built-in coercion rules entirely. ``decode`` must be a
    classmethod. It reports invalid input by raising `ValueError`; a
    `LookupError` (e.g. from ``cls[raw]``) is treated the same way.

    Example:
        ```python
        class LogLevel(IntEnum):
            INFO = 0
            DEBUG = 1

            @classmethod
            def decode(cls, raw: str) -> LogLevel:
                try:
                    return cls[raw.upper()]
                except KeyError:
                    raise ValueError(f"unexpected log level {raw!r}") from None
        ```
    """

    @classmethod
    def decode(cls, raw: str) -> ConfigDecodable:
        """Return the decoded value; raise `ValueError` or `LookupError` on invalid input."""
        ...


def is_decodable(tp: object) -> TypeGuard[type[ConfigDecodable]]:
    """Return True if ``tp`` is a class whose ``decode`` is bound to the class itself.

    Instance methods named ``decode`` (e.g. `bytes.decode`) do not qualify.
    """
    if not isinstance(tp, type):
        return False
    decode: object = getattr(tp, "decode", None)
    return inspect.ismethod(decode) and decode.__self__ is tp
