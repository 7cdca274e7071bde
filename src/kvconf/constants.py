# topmark:header:start
#
#   project      : KVConf
#   file         : constants.py
#   file_relpath : src/kvconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

KVCONF_VERSION: str = get_version("kvconf")

# Dataclass field metadata keys read by the schema description:
KEY_TAG: Final[str] = "cfg"
DEFAULT_TAG: Final[str] = "default"

# A `cfg` tag with this value excludes the field from binding.
EXCLUDE_SENTINEL: Final[str] = "-"

COMMENT_PREFIX: Final[str] = "#"
KEY_VALUE_SEPARATOR: Final[str] = "="
