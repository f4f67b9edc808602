# topmark:header:start
#
#   project      : Csonify
#   file         : __init__.py
#   file_relpath : src/csonify/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify core: value classification, escaping, emission and assembly.

Modules here are free of CLI concerns and perform no I/O.
"""
