# topmark:header:start
#
#   project      : KVConf
#   file         : sources.py
#   file_relpath : src/kvconf/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge an ordered list of configuration files into a record.

`ConfigSet` owns an ordered, append-only list of `ConfigSource` entries. A
merge opens each source in turn, parses it, and folds its table into a running
table: a key defined by a later source overrides the same key from an earlier
one (e.g. a ``local.conf`` overlay on top of ``defaults.conf``). The record is
then populated once from the accumulated table.

Missing sources:
    - ``required=True`` (the default): the merge aborts with `SourceNotFoundError`.
    - ``required=False``: the source is skipped and an INFO message is logged.

Typical flow:
    1. ``configs = ConfigSet()``
    2. ``configs.add_config("/etc/app", "app.conf")``
    3. ``configs.add_config("/etc/app", "local.conf", required=False)``
    4. ``applied = configs.merge_into(settings)``

Each `ConfigSet` is owned by its caller; no module-level state is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from kvconf.config.logging import get_logger
from kvconf.errors import SourceNotFoundError
from kvconf.parser import parse_file
from kvconf.walker import ensure_mutable_record, walk

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kvconf.config.logging import KvconfLogger
    from kvconf.defaults import AppliedDefaults
    from kvconf.parser import KeyValueTable

logger: KvconfLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One configuration file contributing to a merge.

    Attributes:
        path (Path): Directory containing the file.
        name (str): File name within ``path``.
        required (bool): Whether a missing file aborts the merge.
    """

    path: Path
    name: str
    required: bool = True

    @property
    def location(self) -> Path:
        """Full path of the file."""
        return Path(self.path) / self.name


class ConfigSet:
    """Ordered collection of configuration sources, merged in declaration order."""

    def __init__(self, sources: Iterable[ConfigSource] = ()) -> None:
        self._sources: list[ConfigSource] = list(sources)

    def __repr__(self) -> str:
        return f"ConfigSet({self._sources!r})"

    def __len__(self) -> int:
        return len(self._sources)

    @property
    def sources(self) -> tuple[ConfigSource, ...]:
        """The sources in merge order."""
        return tuple(self._sources)

    def add_config(self, path: Path | str, name: str, *, required: bool = True) -> ConfigSource:
        """Append a source; later sources override earlier ones.

        Args:
            path (Path | str): Directory containing the file.
            name (str): File name within ``path``.
            required (bool): If False, a missing file is skipped silently.

        Returns:
            ConfigSource: The added source.
        """
        source = ConfigSource(path=Path(path), name=name, required=required)
        self._sources.append(source)
        return source

    def load_table(self) -> KeyValueTable:
        """Open, parse and fold all sources into one key/value table.

        Returns:
            KeyValueTable: The accumulated table (later sources win).

        Raises:
            SourceNotFoundError: If a required source does not exist.
            SourceReadError: If a source cannot be read or decoded.
        """
        accumulated: KeyValueTable = {}
        for source in self._sources:
            location: Path = source.location
            try:
                table: KeyValueTable = parse_file(location)
            except FileNotFoundError as exc:
                if source.required:
                    raise SourceNotFoundError(location) from exc
                logger.info("Optional config file %s not found; skipping", location)
                continue
            logger.debug("Merging %d key(s) from %s", len(table), location)
            accumulated.update(table)
        return accumulated

    def merge_into(self, target: object) -> AppliedDefaults:
        """Merge all sources into ``target``.

        Args:
            target (object): A mutable dataclass instance.

        Returns:
            AppliedDefaults: Mapping of configuration key to the default applied
                to that field.

        Raises:
            TargetShapeError: If ``target`` is not a mutable dataclass instance.
            SourceNotFoundError: If a required source does not exist.
            SourceReadError: If a source cannot be read or decoded.
            CoercionError: If a value for a field without a default does not coerce.
            DefaultCoercionError: If a declared default does not coerce.
        """
        ensure_mutable_record(target)
        return merge_table_into(self.load_table(), target)


def merge_table_into(table: KeyValueTable, target: object) -> AppliedDefaults:
    """Populate ``target`` from an already-built table and return the applied defaults."""
    applied: AppliedDefaults = {}
    walk(table, target, applied)
    logger.debug("Applied %d default(s) to %s", len(applied), type(target).__qualname__)
    return applied


def load_config_into(file: Path | str, target: object) -> AppliedDefaults:
    """Load a single required configuration file into ``target``.

    Equivalent to a `ConfigSet` holding one required source.
    """
    location = Path(file)
    return ConfigSet([ConfigSource(path=location.parent, name=location.name)]).merge_into(target)
