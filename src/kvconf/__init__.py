# topmark:header:start
#
#   project      : KVConf
#   file         : __init__.py
#   file_relpath : src/kvconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf package.

KVConf loads plain-text ``key = value`` configuration files and populates
nested dataclass records from them. Fields declare their configuration key and
a raw default string through dataclass field metadata (see `setting`); values
are coerced to the field types, with a ``decode`` hook for custom types.

Typical use:

    ```python
    from dataclasses import dataclass

    from kvconf import ConfigSet, setting


    @dataclass
    class Settings:
        server_port: int = setting("server_port", default="8080", initial=0)


    configs = ConfigSet()
    configs.add_config("/etc/myapp", "myapp.conf")
    configs.add_config("/etc/myapp", "local.conf", required=False)

    settings = Settings()
    applied = configs.merge_into(settings)
    ```
"""

from __future__ import annotations

from kvconf.coercion import ConfigDecodable, FileSize, UInt, humanize_size, parse_duration
from kvconf.defaults import AppliedDefault
from kvconf.errors import (
    CoercionError,
    ConfigSourceError,
    DefaultCoercionError,
    KvconfError,
    SourceNotFoundError,
    SourceReadError,
    TargetShapeError,
)
from kvconf.parser import KeyValueTable, parse, parse_file, parse_text
from kvconf.schema import FieldSpec, describe, setting
from kvconf.sources import ConfigSet, ConfigSource, load_config_into, merge_table_into

__all__: list[str] = [
    "AppliedDefault",
    "CoercionError",
    "ConfigDecodable",
    "ConfigSet",
    "ConfigSource",
    "ConfigSourceError",
    "DefaultCoercionError",
    "FieldSpec",
    "FileSize",
    "KeyValueTable",
    "KvconfError",
    "SourceNotFoundError",
    "SourceReadError",
    "TargetShapeError",
    "UInt",
    "describe",
    "humanize_size",
    "load_config_into",
    "merge_table_into",
    "parse",
    "parse_duration",
    "parse_file",
    "parse_text",
    "setting",
]
