# topmark:header:start
#
#   project      : KVConf
#   file         : render.py
#   file_relpath : src/kvconf/cli/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end


"""Machine-readable rendering of key/value tables and populated records.

Formats:
    - ``json``: one JSON document;
    - ``toml``: a TOML document rendered with `tomlkit`.

The ``default`` format is printed line by line by `kvconf.cli.console.ClickConsole`.

Records are converted to plain data (`to_plain`) before rendering: enums become
their lower-case names, timedeltas become strings, nested dataclasses become
tables. TOML has no `null` value, so `None` entries are stripped.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from kvconf.cli.options import OutputFormat
from kvconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kvconf.config.logging import KvconfLogger
    from kvconf.defaults import AppliedDefaults
    from kvconf.parser import KeyValueTable

logger: KvconfLogger = get_logger(__name__)


def to_plain(value: object) -> object:
    """Convert a record value into JSON/TOML-compatible plain data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.name.lower()
    if isinstance(value, timedelta):
        return str(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        return str(value)
    return value


def record_fields(record: object, prefix: str = "") -> Iterator[tuple[str, object]]:
    """Yield ``(dotted.path, value)`` for every leaf field of a record, in declaration order."""
    for fld in dataclasses.fields(cast("Any", record)):
        path: str = f"{prefix}.{fld.name}" if prefix else fld.name
        value: object = getattr(record, fld.name)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            yield from record_fields(value, path)
        else:
            yield path, value


def _strip_none(value: object) -> object:
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        for k_any, v_any in cast("Mapping[object, object]", value).items():
            if v_any is None:
                logger.debug("Ignoring `None` entry for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none(v_any)
        return out
    return value


def _dumps(data: Mapping[str, object], fmt: OutputFormat) -> str:
    if fmt == OutputFormat.JSON:
        return json.dumps(data, indent=2)
    return cast("str", cast("Any", tomlkit).dumps(_strip_none(data))).rstrip("\n")


def render_table(table: KeyValueTable, fmt: OutputFormat) -> str:
    """Render a merged key/value table.

    Args:
        table (KeyValueTable): The table to render.
        fmt (OutputFormat): ``JSON`` or ``TOML``.

    Returns:
        str: The rendered document (without trailing newline).
    """
    return _dumps(table, fmt)


def render_record(record: object, applied: AppliedDefaults, fmt: OutputFormat) -> str:
    """Render a populated record together with the defaults applied to it.

    Args:
        record (object): The populated dataclass instance.
        applied (AppliedDefaults): Audit mapping returned by the merge.
        fmt (OutputFormat): ``JSON`` or ``TOML``.

    Returns:
        str: The rendered document (without trailing newline).
    """
    plain = cast("dict[str, object]", to_plain(record))
    defaults: dict[str, str] = {key: entry.value for key, entry in applied.items()}
    return _dumps({"settings": plain, "applied_defaults": defaults}, fmt)
