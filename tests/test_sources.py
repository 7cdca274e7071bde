# topmark:header:start
#
#   project      : KVConf
#   file         : test_sources.py
#   file_relpath : tests/test_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end merge tests for `ConfigSet` and `load_config_into`."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

import pytest

from kvconf.coercion.sizes import FileSize
from kvconf.defaults import AppliedDefault
from kvconf.errors import (
    CoercionError,
    SourceNotFoundError,
    SourceReadError,
    TargetShapeError,
)
from kvconf.schema import setting
from kvconf.sources import ConfigSet, ConfigSource, load_config_into


@dataclass
class InnerServer:
    address: str = setting("server_address", initial="")
    port: int = setting("server_port", initial=0)


@dataclass
class StandardConfig:
    name: str = setting("session_name", initial="")
    address: str = setting("Address", initial="")
    port: int = setting("port", default="8080", initial=0)
    size: FileSize = setting("Size", default="30", initial=FileSize(0))
    ssl: bool = setting("ssl", initial=False)
    verbose: bool = setting("verbose", default="true", initial=False)
    timeout: timedelta = setting("session_timeout", initial=timedelta(0))
    file_location: str = setting("file_location", default="/dev/null", initial="")
    ignored: str = setting("-", initial="untouched")
    server: InnerServer = field(default_factory=InnerServer)


def test_merge_sample_file(data_dir: Path) -> None:
    """The sample file populates every bound field and applies the missing defaults."""
    configs = ConfigSet()
    configs.add_config(data_dir, "config.conf")
    cfg = StandardConfig()

    applied = configs.merge_into(cfg)

    assert cfg.name == "the-session-name"
    assert cfg.address == "127.0.0.1"
    assert cfg.port == 8080
    assert cfg.size == 30
    assert cfg.ssl is True
    assert cfg.verbose is True  # invalid file value, default applied
    assert cfg.timeout == timedelta(minutes=10)
    assert cfg.file_location == "/dev/null"
    assert cfg.ignored == "untouched"
    assert cfg.server == InnerServer(address="localhost", port=42)
    assert applied == {
        "Size": AppliedDefault("Size", "30"),
        "verbose": AppliedDefault("verbose", "true"),
        "file_location": AppliedDefault("file_location", "/dev/null"),
    }


def test_later_sources_override_earlier_ones(data_dir: Path) -> None:
    """A key in a later file overrides the same key in an earlier file."""
    configs = ConfigSet()
    configs.add_config(data_dir, "config.conf")
    configs.add_config(data_dir, "overlay.conf")
    cfg = StandardConfig()

    configs.merge_into(cfg)

    assert cfg.port == 9090
    assert cfg.name == "overlay-session"
    assert cfg.address == "127.0.0.1"


def test_optional_missing_source_is_skipped(
    data_dir: Path,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A missing optional source contributes nothing and is logged at INFO."""
    configs = ConfigSet()
    configs.add_config(data_dir, "config.conf")
    configs.add_config(tmp_path, "local.conf", required=False)
    cfg = StandardConfig()

    with caplog.at_level("INFO", logger="kvconf.sources"):
        configs.merge_into(cfg)

    assert cfg.port == 8080
    assert "local.conf" in caplog.text


def test_required_missing_source_aborts(tmp_path: Path) -> None:
    """A missing required source raises before anything is populated."""
    configs = ConfigSet()
    configs.add_config(tmp_path, "absent.conf")
    cfg = StandardConfig()

    with pytest.raises(SourceNotFoundError) as excinfo:
        configs.merge_into(cfg)

    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == tmp_path / "absent.conf"
    assert cfg == StandardConfig()


def test_coercion_error_names_the_offending_entry(
    write_config: Callable[[str, str], Path],
) -> None:
    """A bad value for a field without a default aborts the whole merge."""
    path = write_config("bad.conf", "ssl = maybe\n")

    with pytest.raises(CoercionError, match=r"\[maybe\] for key \[ssl\]"):
        load_config_into(path, StandardConfig())


def test_invalid_utf8_source_raises_read_error(tmp_path: Path) -> None:
    """Undecodable content is reported as a read error."""
    (tmp_path / "latin1.conf").write_bytes(b"name = caf\xe9\n")
    configs = ConfigSet([ConfigSource(tmp_path, "latin1.conf")])

    with pytest.raises(SourceReadError):
        configs.load_table()


def test_load_config_into_single_file(write_config: Callable[[str, str], Path]) -> None:
    """`load_config_into` behaves like a set with one required source."""
    path = write_config("single.conf", "session_name = solo\nSize = 1KB\n")
    cfg = StandardConfig()

    applied = load_config_into(path, cfg)

    assert cfg.name == "solo"
    assert cfg.size == 1024
    assert "Size" not in applied
    assert "port" in applied


def test_load_config_into_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError):
        load_config_into(tmp_path / "nope.conf", StandardConfig())


def test_merge_into_rejects_bad_target_before_reading(tmp_path: Path) -> None:
    """Target shape is checked before any source is opened."""
    configs = ConfigSet()
    configs.add_config(tmp_path, "absent.conf")

    with pytest.raises(TargetShapeError):
        configs.merge_into(StandardConfig)


def test_config_set_keeps_sources_in_order(tmp_path: Path) -> None:
    """Sources are kept in insertion order with their flags."""
    configs = ConfigSet()
    first = configs.add_config(tmp_path, "a.conf")
    second = configs.add_config(str(tmp_path), "b.conf", required=False)

    assert len(configs) == 2
    assert configs.sources == (first, second)
    assert second == ConfigSource(tmp_path, "b.conf", required=False)
    assert second.location == tmp_path / "b.conf"


def test_config_sets_are_independent(data_dir: Path) -> None:
    """Each set owns its sources."""
    one = ConfigSet()
    other = ConfigSet()
    one.add_config(data_dir, "config.conf")

    assert len(other) == 0
    assert other.load_table() == {}
