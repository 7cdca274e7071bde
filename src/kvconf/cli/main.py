# topmark:header:start
#
#   project      : KVConf
#   file         : main.py
#   file_relpath : src/kvconf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Subcommands fetch the shared console from ``ctx.obj`` for program output;
  diagnostics go through `logging` only.
"""

from __future__ import annotations

import click

from kvconf.cli.commands.demo import demo_command
from kvconf.cli.commands.dump import dump_command
from kvconf.cli.commands.version import version_command
from kvconf.cli.console import ClickConsole
from kvconf.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from kvconf.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # CLI flags win over KVCONF_LOG_LEVEL
    level: int | None = resolve_verbosity(verbose, quiet)
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="KVConf: merge key/value config files into typed records.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the KVConf CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'kvconf dump FILE...' to inspect merged config files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
