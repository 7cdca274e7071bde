# topmark:header:start
#
#   project      : KVConf
#   file         : defaults.py
#   file_relpath : src/kvconf/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declared-default bookkeeping for one record level.

Every field declaring a default is registered as *pending* before the file data
is consulted, and is discharged as soon as a file value coerces successfully.
Whatever is still pending when the level has been walked gets its default
applied by `apply_defaults`, which also records it in the audit mapping
returned to the caller.

A default that fails to coerce is a schema bug and always raises
`DefaultCoercionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kvconf.coercion.engine import coerce_with
from kvconf.config.logging import get_logger
from kvconf.errors import CoercionError, DefaultCoercionError

if TYPE_CHECKING:
    from kvconf.config.logging import KvconfLogger
    from kvconf.schema import FieldSpec

logger: KvconfLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AppliedDefault:
    """Audit entry for a field that ended up holding its declared default.

    Attributes:
        key (str): Configuration key of the field.
        value (str): The raw default string that was applied.
    """

    key: str
    value: str


# Audit mapping: configuration key -> applied default.
AppliedDefaults = dict[str, AppliedDefault]

# Pending defaults of one record level: configuration key -> field descriptor.
PendingDefaults = dict[str, "FieldSpec"]


def apply_defaults(record: object, pending: PendingDefaults, applied: AppliedDefaults) -> None:
    """Set every pending default on ``record`` and record it in ``applied``.

    Args:
        record (object): The dataclass instance owning the pending fields.
        pending (PendingDefaults): Fields of this level still waiting for a value.
        applied (AppliedDefaults): Audit mapping updated in place.

    Raises:
        DefaultCoercionError: If a declared default does not coerce.
    """
    for key, spec in pending.items():
        # Only fields with a declared default are ever registered as pending.
        assert spec.default is not None and spec.coercer is not None
        try:
            value = coerce_with(spec.coercer, key, spec.default)
        except CoercionError as exc:
            raise DefaultCoercionError(key, spec.default, exc.reason) from exc
        setattr(record, spec.name, value)
        applied[key] = AppliedDefault(key=key, value=spec.default)
        logger.debug("Applied default [%s] = %r", key, spec.default)
