# topmark:header:start
#
#   project      : KVConf
#   file         : dump.py
#   file_relpath : src/kvconf/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf `dump` command.

Merges the given config files (later files override earlier ones) and prints
the resulting key/value table. No record binding or coercion takes place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvconf.cli.errors import cli_error_for
from kvconf.cli.options import OutputFormat, config_source_options, output_format_option
from kvconf.cli.render import render_table
from kvconf.cli.utils import build_config_set, get_console
from kvconf.config.logging import get_logger
from kvconf.errors import KvconfError

if TYPE_CHECKING:
    from pathlib import Path

    from kvconf.config.logging import KvconfLogger
    from kvconf.parser import KeyValueTable

logger: KvconfLogger = get_logger(__name__)


@click.command(
    name="dump",
    help="Merge FILES in order and print the resulting key/value table.",
)
@config_source_options
@output_format_option
def dump_command(
    *,
    files: tuple[Path, ...],
    missing_ok: bool,
    output_format: OutputFormat,
) -> None:
    """Print the merged key/value table of FILES.

    Args:
        files (tuple[Path, ...]): Config files in merge order.
        missing_ok (bool): Skip files that do not exist.
        output_format (OutputFormat): Output format.
    """
    console = get_console(click.get_current_context())
    configs = build_config_set(files, missing_ok=missing_ok)

    try:
        table: KeyValueTable = configs.load_table()
    except KvconfError as exc:
        raise cli_error_for(exc) from exc

    logger.debug("dump: %d key(s) from %d file(s)", len(table), len(configs))
    if output_format == OutputFormat.DEFAULT:
        console.print_table(table)
    else:
        console.print(render_table(table, output_format))
