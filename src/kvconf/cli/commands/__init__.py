# topmark:header:start
#
#   project      : KVConf
#   file         : __init__.py
#   file_relpath : src/kvconf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KVConf CLI subcommands."""
