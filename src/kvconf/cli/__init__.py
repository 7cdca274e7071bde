# topmark:header:start
#
#   project      : KVConf
#   file         : __init__.py
#   file_relpath : src/kvconf/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for KVConf."""
