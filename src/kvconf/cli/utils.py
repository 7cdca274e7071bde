# topmark:header:start
#
#   project      : KVConf
#   file         : utils.py
#   file_relpath : src/kvconf/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the KVConf CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvconf.sources import ConfigSet

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from kvconf.cli.console import ClickConsole


def build_config_set(files: Iterable[Path], *, missing_ok: bool) -> ConfigSet:
    """Create a `ConfigSet` from command-line paths, preserving their order."""
    configs = ConfigSet()
    for file in files:
        configs.add_config(file.parent, file.name, required=not missing_ok)
    return configs


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the group context by `init_common_state`."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]
