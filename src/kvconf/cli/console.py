# topmark:header:start
#
#   project      : KVConf
#   file         : console.py
#   file_relpath : src/kvconf/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable program output for the KVConf CLI.

`ClickConsole` prints merged tables, populated settings and the applied-default
audit in the ``default`` output format. Machine formats (JSON, TOML) are built
by `kvconf.cli.render` and printed verbatim through `ClickConsole.print`.

With color disabled the output is plain text: a table printed by `print_table`
parses back to the same table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from kvconf.cli.render import to_plain
from kvconf.coercion.sizes import FileSize

if TYPE_CHECKING:
    from kvconf.defaults import AppliedDefaults
    from kvconf.parser import KeyValueTable


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, keys and annotations are styled with ANSI colors.
    """

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a line to stdout."""
        click.echo(text, nl=nl, color=self.enable_color)

    def error(self, text: str) -> None:
        """Write an error message to stderr."""
        click.echo(self.styled(text, fg="bright_red"), err=True, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def _pair(self, key: str, value: object) -> str:
        return f"{self.styled(key, fg='cyan')} = {value}"

    def print_table(self, table: KeyValueTable) -> None:
        """Print a merged key/value table as ``key = value`` lines."""
        for key, value in table.items():
            self.print(self._pair(key, value))

    def print_setting(self, path: str, value: object) -> None:
        """Print one populated record field.

        Byte sizes are followed by their human-readable form, e.g.
        ``filesize = 10485760 (10.0 MB)``.
        """
        line: str = self._pair(path, to_plain(value))
        if isinstance(value, FileSize):
            line += " " + self.styled(f"({value.humanize()})", dim=True)
        self.print(line)

    def print_applied_defaults(self, applied: AppliedDefaults) -> None:
        """Print the audit of defaults applied during a merge."""
        self.print()
        self.print(self.styled("applied defaults:", bold=True))
        if not applied:
            self.print(self.styled("  (none)", dim=True))
            return
        for key, entry in applied.items():
            self.print(f"  {self.styled(key, fg='yellow')} = {entry.value}")
