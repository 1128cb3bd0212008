# buildwire:header:start
#
#   project      : BuildWire
#   file         : __init__.py
#   file_relpath : src/buildwire/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Shared, dependency-light building blocks (enums, exit codes, machine output)."""
