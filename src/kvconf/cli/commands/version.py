# topmark:header:start
#
#   project      : KVConf
#   file         : version.py
#   file_relpath : src/kvconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf `version` command.

Prints the current KVConf version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click
import tomlkit

from kvconf.cli.options import OutputFormat, output_format_option
from kvconf.cli.utils import get_console
from kvconf.constants import KVCONF_VERSION


@click.command(
    name="version",
    help="Show the current version of KVConf.",
)
@output_format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of KVConf.

    Args:
        output_format (OutputFormat): Output format.
    """
    console = get_console(click.get_current_context())

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": KVCONF_VERSION}))
    elif output_format == OutputFormat.TOML:
        console.print(tomlkit.dumps({"version": KVCONF_VERSION}), nl=False)
    else:
        console.print(console.styled(KVCONF_VERSION, bold=True))
