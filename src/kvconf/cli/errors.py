# topmark:header:start
#
#   project      : KVConf
#   file         : errors.py
#   file_relpath : src/kvconf/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the KVConf CLI.

Usage:
    Commands catch library errors (`kvconf.errors.KvconfError`) and re-raise
    them through `cli_error_for`, which picks the matching exception class and
    thereby the process exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from kvconf.cli.exit_codes import ExitCode
from kvconf.errors import (
    CoercionError,
    KvconfError,
    SourceNotFoundError,
    SourceReadError,
    TargetShapeError,
)


class KvconfCliError(click.ClickException):
    """Base class for all KVConf CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class KvconfUsageError(KvconfCliError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class KvconfConfigError(KvconfCliError):
    """Error for invalid config values or declared defaults."""

    exit_code = ExitCode.CONFIG_ERROR


class KvconfFileNotFoundError(KvconfCliError):
    """Error when a required config file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class KvconfIOError(KvconfCliError):
    """Error for I/O errors reading config files."""

    exit_code = ExitCode.IO_ERROR


class KvconfEncodingError(KvconfCliError):
    """Error for config files that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class KvconfUnexpectedError(KvconfCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def cli_error_for(exc: KvconfError) -> KvconfCliError:
    """Map a library error onto the CLI exception carrying its exit code.

    Args:
        exc (KvconfError): The error raised by the library.

    Returns:
        KvconfCliError: The CLI exception to raise.
    """
    message = str(exc)
    if isinstance(exc, SourceNotFoundError):
        return KvconfFileNotFoundError(message)
    if isinstance(exc, SourceReadError):
        if isinstance(exc.__cause__, UnicodeDecodeError):
            return KvconfEncodingError(message)
        return KvconfIOError(message)
    if isinstance(exc, CoercionError):
        return KvconfConfigError(message)
    if isinstance(exc, TargetShapeError):
        return KvconfUnexpectedError(message)
    return KvconfCliError(message)
