# topmark:header:start
#
#   project      : KVConf
#   file         : walker.py
#   file_relpath : src/kvconf/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bind a key/value table onto a (possibly nested) dataclass record.

For each field of the record, in declaration order:

- nested records are walked recursively with the same table, so their fields
  live in the same flat key namespace as the outer ones;
- fields declaring a default are registered as pending;
- if the table holds the field's key, the value is coerced and set, and the
  pending default (if any) is discharged.

Coercion failures are fatal for fields without a default. For fields *with* a
default the failure is logged and swallowed: the field stays pending and its
default is applied at the end of the level. This masks malformed file values;
callers can spot them through the audit mapping.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from kvconf.coercion.engine import coerce_with
from kvconf.config.logging import get_logger
from kvconf.defaults import apply_defaults
from kvconf.errors import CoercionError, TargetShapeError
from kvconf.schema import describe

if TYPE_CHECKING:
    from kvconf.config.logging import KvconfLogger
    from kvconf.defaults import AppliedDefaults, PendingDefaults
    from kvconf.parser import KeyValueTable
    from kvconf.schema import FieldSpec

logger: KvconfLogger = get_logger(__name__)


def ensure_mutable_record(target: object) -> None:
    """Check that ``target`` is a dataclass instance that can be assigned to.

    Raises:
        TargetShapeError: If ``target`` is a class, not a dataclass, or a frozen dataclass.
    """
    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise TargetShapeError(
            f"Merge target must be a dataclass instance, got {type(target).__qualname__}"
        )
    params: Any = getattr(target, "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise TargetShapeError(
            f"Merge target {type(target).__qualname__} is a frozen dataclass"
        )


def _nested_record(record: object, spec: FieldSpec) -> object:
    child: object = getattr(record, spec.name, None)
    if child is None:
        assert spec.record_type is not None
        child = spec.record_type()
        setattr(record, spec.name, child)
    return child


def walk(table: KeyValueTable, record: object, applied: AppliedDefaults) -> None:
    """Populate ``record`` from ``table``, applying defaults level by level.

    Args:
        table (KeyValueTable): Accumulated key/value table.
        record (object): Mutable dataclass instance to populate.
        applied (AppliedDefaults): Audit mapping of applied defaults, updated in place.

    Raises:
        TargetShapeError: If ``record`` (or a nested record) is not a mutable dataclass.
        CoercionError: If a value for a field without a default does not coerce.
        DefaultCoercionError: If a declared default does not coerce.
    """
    ensure_mutable_record(record)
    pending: PendingDefaults = {}

    for spec in describe(type(record)):
        if spec.nested:
            walk(table, _nested_record(record, spec), applied)
            continue

        if spec.has_default:
            pending[spec.key] = spec

        if spec.key not in table:
            continue

        raw: str = table[spec.key]
        assert spec.coercer is not None
        try:
            value = coerce_with(spec.coercer, spec.key, raw)
        except CoercionError as exc:
            if not spec.has_default:
                raise
            logger.debug("Ignoring invalid value for [%s]; using default: %s", spec.key, exc)
            continue

        setattr(record, spec.name, value)
        pending.pop(spec.key, None)

    apply_defaults(record, pending, applied)
