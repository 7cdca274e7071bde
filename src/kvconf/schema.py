# topmark:header:start
#
#   project      : KVConf
#   file         : schema.py
#   file_relpath : src/kvconf/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Describe dataclass records as ordered lists of bindable fields.

Records are plain dataclasses. Each field may carry two metadata entries:

- ``"cfg"``: the configuration key (the field name is used when absent);
  the value ``"-"`` excludes the field;
- ``"default"``: the raw default string, coerced like a file value when the
  file provides no (valid) value for the key.

`setting` is a thin wrapper over `dataclasses.field` that fills in this
metadata. `describe` turns a record type into `FieldSpec` descriptors; the
walker operates on these descriptors only and never inspects types itself.

Scope:
    - *In scope*: key resolution, exclusion, default lookup, coercer selection,
      nested-record detection.
    - *Out of scope*: reading files and setting values (see `kvconf.walker`).
"""

from __future__ import annotations

import dataclasses
from dataclasses import MISSING, dataclass
from typing import TYPE_CHECKING, Any, get_type_hints

from kvconf.coercion.engine import coercer_for, unwrap_optional
from kvconf.config.logging import get_logger
from kvconf.constants import DEFAULT_TAG, EXCLUDE_SENTINEL, KEY_TAG
from kvconf.errors import TargetShapeError

if TYPE_CHECKING:
    from collections.abc import Callable

    from kvconf.coercion.engine import Coercer
    from kvconf.config.logging import KvconfLogger

logger: KvconfLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Binding of one dataclass field to the flat configuration namespace.

    Attributes:
        name (str): Attribute name on the record.
        key (str): Resolved configuration key (empty for nested records).
        default (str | None): Raw default string, or None if no default is declared.
        coercer (Coercer | None): Converter for raw strings (None for nested records).
        record_type (type | None): Dataclass type of a nested record field, else None.
    """

    name: str
    key: str
    default: str | None = None
    coercer: Coercer | None = None
    record_type: type | None = None

    @property
    def nested(self) -> bool:
        """Whether this field holds a nested record to recurse into."""
        return self.record_type is not None

    @property
    def has_default(self) -> bool:
        """Whether a default value is declared for this field."""
        return self.default is not None


def setting(
    key: str | None = None,
    *,
    default: str | None = None,
    initial: Any = MISSING,
    factory: Callable[[], Any] | Any = MISSING,
    **field_kwargs: Any,
) -> Any:
    """Declare a configuration-bound dataclass field.

    Args:
        key (str | None): Configuration key; the field name is used if None.
            Use ``"-"`` to exclude the field.
        default (str | None): Raw default string applied when the key is
            missing from the files or its value fails to coerce.
        initial (Any): Python-level initial value of the attribute (the
            dataclass ``default``); unrelated to the configuration default.
        factory (Callable[[], Any] | Any): Python-level ``default_factory``.
        **field_kwargs (Any): Forwarded to `dataclasses.field`.

    Returns:
        Any: The `dataclasses.Field` object, typed as Any for use as a class attribute value.
    """
    metadata: dict[str, Any] = dict(field_kwargs.pop("metadata", None) or {})
    if key is not None:
        metadata[KEY_TAG] = key
    if default is not None:
        metadata[DEFAULT_TAG] = default
    return dataclasses.field(
        default=initial,
        default_factory=factory,
        metadata=metadata,
        **field_kwargs,
    )


def _resolve_hints(record_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(record_type)
    except (NameError, TypeError) as exc:
        raise TargetShapeError(
            f"Cannot resolve field types of {record_type.__qualname__}: {exc}"
        ) from exc


def describe(record_type: type) -> tuple[FieldSpec, ...]:
    """Describe the bindable fields of a dataclass type, in declaration order.

    Fields are skipped when their key is ``"-"``, when their name starts with an
    underscore, or when their type has no coercer (a TRACE message is logged).

    Args:
        record_type (type): A dataclass type.

    Returns:
        tuple[FieldSpec, ...]: One descriptor per bindable field.

    Raises:
        TargetShapeError: If ``record_type`` is not a dataclass or its type hints
            cannot be resolved.
    """
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise TargetShapeError(f"{record_type!r} is not a dataclass type")

    hints: dict[str, Any] = _resolve_hints(record_type)
    specs: list[FieldSpec] = []

    for fld in dataclasses.fields(record_type):
        if fld.name.startswith("_"):
            continue

        tp: Any = unwrap_optional(hints.get(fld.name, fld.type))
        if isinstance(tp, type) and dataclasses.is_dataclass(tp):
            specs.append(FieldSpec(name=fld.name, key="", record_type=tp))
            continue

        key: str = fld.metadata.get(KEY_TAG) or fld.name
        if key == EXCLUDE_SENTINEL:
            logger.trace("%s.%s excluded", record_type.__qualname__, fld.name)
            continue

        coercer: Coercer | None = coercer_for(tp)
        if coercer is None:
            logger.trace(
                "%s.%s has unsupported type %r; not bound",
                record_type.__qualname__,
                fld.name,
                tp,
            )
            continue

        default: str | None = fld.metadata.get(DEFAULT_TAG)
        specs.append(FieldSpec(name=fld.name, key=key, default=default, coercer=coercer))

    return tuple(specs)
