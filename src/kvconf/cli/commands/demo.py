# topmark:header:start
#
#   project      : KVConf
#   file         : demo.py
#   file_relpath : src/kvconf/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf `demo` command.

Loads FILES into the example `kvconf.demo.Settings` record and prints the
populated fields together with the defaults that were applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvconf.cli.errors import cli_error_for
from kvconf.cli.options import OutputFormat, config_source_options, output_format_option
from kvconf.cli.render import record_fields, render_record
from kvconf.cli.utils import build_config_set, get_console
from kvconf.demo import Settings
from kvconf.errors import KvconfError

if TYPE_CHECKING:
    from pathlib import Path

    from kvconf.defaults import AppliedDefaults


@click.command(
    name="demo",
    help="Load FILES into the demo settings record and print the result.",
)
@config_source_options
@output_format_option
def demo_command(
    *,
    files: tuple[Path, ...],
    missing_ok: bool,
    output_format: OutputFormat,
) -> None:
    """Populate the demo `Settings` record from FILES.

    Args:
        files (tuple[Path, ...]): Config files in merge order.
        missing_ok (bool): Skip files that do not exist.
        output_format (OutputFormat): Output format.
    """
    console = get_console(click.get_current_context())
    settings = Settings()

    try:
        applied: AppliedDefaults = build_config_set(files, missing_ok=missing_ok).merge_into(
            settings
        )
    except KvconfError as exc:
        raise cli_error_for(exc) from exc

    if output_format == OutputFormat.DEFAULT:
        for path, value in record_fields(settings):
            console.print_setting(path, value)
        console.print_applied_defaults(applied)
    else:
        console.print(render_record(settings, applied, output_format))
