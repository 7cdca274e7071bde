# topmark:header:start
#
#   project      : KVConf
#   file         : errors.py
#   file_relpath : src/kvconf/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the KVConf library.

Every error aborts the merge in progress; there is no partial-success mode.
After any of these is raised the target record must be treated as unfinished.

Hierarchy:
    - `KvconfError`
        - `ConfigSourceError`: a source could not be opened or read.
            - `SourceNotFoundError`: a required source does not exist.
            - `SourceReadError`: I/O or decoding failure while reading.
        - `TargetShapeError`: the merge target is not a mutable dataclass record.
        - `CoercionError`: a raw value does not parse for the field's type.
            - `DefaultCoercionError`: a declared default does not parse.

The CLI maps these onto exit codes in `kvconf.cli.errors`.
"""

from __future__ import annotations

from pathlib import Path


class KvconfError(Exception):
    """Base class for all KVConf errors."""


class ConfigSourceError(KvconfError):
    """A configuration source could not be opened or read.

    Attributes:
        path (Path): Location of the offending source.
    """

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(message)


class SourceNotFoundError(ConfigSourceError, FileNotFoundError):
    """A required configuration source does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Config file not found: {path}")


class SourceReadError(ConfigSourceError):
    """A configuration source exists but could not be read or decoded."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.reason = reason
        super().__init__(path, f"Cannot read config file {path}: {reason}")


class TargetShapeError(KvconfError, TypeError):
    """The merge target is not a mutable dataclass instance."""


class CoercionError(KvconfError, ValueError):
    """A raw string could not be converted to the field's type.

    Attributes:
        key (str): Configuration key of the field.
        raw (str): The raw value that failed to coerce.
        reason (str): Human-readable cause reported by the coercer.
    """

    def __init__(self, key: str, raw: str, reason: object) -> None:
        self.key = key
        self.raw = raw
        self.reason = str(reason)
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"error while setting value [{self.raw}] for key [{self.key}]: {self.reason}"


class DefaultCoercionError(CoercionError):
    """A declared default value does not coerce to its field's type."""

    def _describe(self) -> str:
        return f"error while setting default value [{self.raw}] for key [{self.key}]: {self.reason}"
