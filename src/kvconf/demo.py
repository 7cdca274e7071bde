# topmark:header:start
#
#   project      : KVConf
#   file         : demo.py
#   file_relpath : src/kvconf/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Example settings record used by ``kvconf demo``.

A matching configuration file looks like this:

    ```
    # myconfig.conf
    filesize = 10MB
    log_file = /var/log/my.log
    log_level = debug
    ```

``server_port`` is absent, so it falls back to its default ``8080``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from kvconf.coercion.sizes import FileSize
from kvconf.schema import setting


class LogLevel(IntEnum):
    """Log level decoded from ``info``/``debug`` (case-insensitive)."""

    INFO = 0
    DEBUG = 1

    @classmethod
    def decode(cls, raw: str) -> LogLevel:
        """Decode a log level name.

        Raises:
            ValueError: If ``raw`` is not a known level name.
        """
        try:
            return cls[raw.upper()]
        except KeyError:
            raise ValueError(f"unexpected config value '{raw}' for log level") from None


@dataclass
class Log:
    """Logging section; its keys share the top-level namespace."""

    file: str = setting("log_file", initial="")
    level: LogLevel = setting("log_level", initial=LogLevel.INFO)


@dataclass
class Settings:
    """Demo application settings."""

    server_port: int = setting("server_port", default="8080", initial=0)
    filesize: FileSize = setting("filesize", initial=FileSize(0))
    log: Log = field(default_factory=Log)
