# topmark:header:start
#
#   project      : KVConf
#   file         : test_walker.py
#   file_relpath : tests/test_walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for binding key/value tables onto records (`kvconf.walker`, `kvconf.defaults`)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

import pytest

from kvconf.defaults import AppliedDefault
from kvconf.errors import CoercionError, DefaultCoercionError, TargetShapeError
from kvconf.schema import setting
from kvconf.sources import merge_table_into


@dataclass
class Server:
    address: str = setting("server_address", initial="")
    port: int = setting("server_port", default="80", initial=0)


@dataclass
class App:
    verbose: bool = setting("verbose", default="yes", initial=False)
    retries: int = setting("retries", initial=3)
    name: str = setting("name", default="", initial="unset")
    server: Server = field(default_factory=Server)


@dataclass
class Lazy:
    server: Optional[Server] = None


@dataclass
class BadDefault:
    port: int = setting("port", default="eighty", initial=0)


class Port(int):
    """Port number; an int subclass without a decode hook."""


class Level(IntEnum):
    QUIET = 0
    LOUD = 1


@dataclass
class Typed:
    port: Port = setting("port", default="80", initial=Port(0))
    level: Level = setting("level", initial=Level.QUIET)
    blob: bytes = setting("blob", default="x", initial=b"")


@dataclass(frozen=True)
class Frozen:
    value: str = setting("value", initial="")


def test_defaults_applied_for_missing_keys() -> None:
    """Keys absent from the table get their defaults, recorded in the audit mapping."""
    app = App()

    applied = merge_table_into({}, app)

    assert app.verbose is True
    assert app.name == ""
    assert app.server.port == 80
    assert applied == {
        "verbose": AppliedDefault("verbose", "yes"),
        "name": AppliedDefault("name", ""),
        "server_port": AppliedDefault("server_port", "80"),
    }


def test_invalid_value_falls_back_to_default() -> None:
    """A malformed value for a field with a default is silently replaced by the default."""
    app = App()

    applied = merge_table_into({"verbose": "not-a-boolean"}, app)

    assert app.verbose is True
    assert applied["verbose"] == AppliedDefault("verbose", "yes")


def test_valid_file_value_discharges_default() -> None:
    """Fields set from the table do not appear in the audit mapping."""
    app = App()

    applied = merge_table_into({"verbose": "no", "name": "svc", "server_port": "8443"}, app)

    assert app.verbose is False
    assert app.name == "svc"
    assert app.server.port == 8443
    assert applied == {}


def test_invalid_value_without_default_is_fatal() -> None:
    """Without a default, a coercion failure aborts the merge."""
    with pytest.raises(CoercionError) as excinfo:
        merge_table_into({"retries": "many"}, App())

    assert not isinstance(excinfo.value, DefaultCoercionError)
    assert excinfo.value.key == "retries"
    assert str(excinfo.value) == (
        "error while setting value [many] for key [retries]: invalid integer 'many'"
    )


def test_missing_key_without_default_keeps_initial_value() -> None:
    """Fields with neither a table entry nor a default are left untouched."""
    app = App(retries=7)

    merge_table_into({}, app)

    assert app.retries == 7


def test_invalid_default_raises_default_coercion_error() -> None:
    """A default that does not coerce is always an error."""
    with pytest.raises(DefaultCoercionError) as excinfo:
        merge_table_into({}, BadDefault())

    assert excinfo.value.raw == "eighty"
    assert str(excinfo.value).startswith("error while setting default value [eighty] for key [port]")


def test_invalid_default_raises_even_when_file_value_is_also_invalid() -> None:
    """Falling back to a broken default still fails."""
    with pytest.raises(DefaultCoercionError):
        merge_table_into({"port": "x"}, BadDefault())


def test_nested_fields_share_the_flat_namespace() -> None:
    """Nested record keys are looked up in the same table as outer keys."""
    app = App()

    merge_table_into({"server_address": "localhost", "server_port": "42"}, app)

    assert app.server == Server(address="localhost", port=42)


def test_none_nested_record_is_instantiated() -> None:
    """A nested record that is None is created before being populated."""
    lazy = Lazy()

    applied = merge_table_into({"server_address": "db"}, lazy)

    assert lazy.server == Server(address="db", port=80)
    assert set(applied) == {"server_port"}


def test_unknown_keys_are_ignored() -> None:
    """Table entries without a matching field are not an error."""
    app = App()

    merge_table_into({"unknown": "value"}, app)

    assert not hasattr(app, "unknown")


@pytest.mark.parametrize(
    "target",
    [Frozen(), App, {"verbose": "yes"}, object()],
    ids=["frozen", "class-object", "dict", "plain-object"],
)
def test_non_mutable_record_targets_are_rejected(target: object) -> None:
    """Only mutable dataclass instances can be populated."""
    with pytest.raises(TargetShapeError):
        merge_table_into({"value": "x"}, target)


def test_int_subclass_field_takes_default() -> None:
    """A subclassed primitive field is bound: its default applies when the key is absent."""
    typed = Typed()

    applied = merge_table_into({}, typed)

    assert typed.port == 80
    assert type(typed.port) is Port
    assert applied["port"] == AppliedDefault("port", "80")


def test_int_subclass_and_int_enum_fields_take_file_values() -> None:
    typed = Typed()

    applied = merge_table_into({"port": "8080", "level": "1"}, typed)

    assert typed.port == 8080
    assert type(typed.port) is Port
    assert typed.level is Level.LOUD
    assert "port" not in applied


def test_int_enum_field_rejects_unknown_member() -> None:
    """Without a default, an out-of-range enum value is fatal."""
    with pytest.raises(CoercionError, match=r"for key \[level\]"):
        merge_table_into({"level": "5"}, Typed())


def test_bytes_field_is_not_bound() -> None:
    """bytes has no class-level decode hook; the field is skipped, never crashing the merge."""
    typed = Typed()

    applied = merge_table_into({"blob": "abc"}, typed)

    assert typed.blob == b""
    assert "blob" not in applied
