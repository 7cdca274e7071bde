# topmark:header:start
#
#   project      : KVConf
#   file         : __main__.py
#   file_relpath : src/kvconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running KVConf via ``python -m kvconf``.

It delegates directly to :func:`kvconf.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how KVConf is launched.

Examples:
    Print the merged table of two files::

        python -m kvconf dump defaults.conf local.conf
"""

from __future__ import annotations

from kvconf.cli.main import cli

if __name__ == "__main__":
    cli()
