# topmark:header:start
#
#   project      : KVConf
#   file         : __init__.py
#   file_relpath : src/kvconf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration of KVConf itself (logging setup)."""

from __future__ import annotations
