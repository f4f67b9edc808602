# topmark:header:start
#
#   project      : Csonify
#   file         : __init__.py
#   file_relpath : src/csonify/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify CLI subcommands."""
