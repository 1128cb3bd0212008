# buildwire:header:start
#
#   project      : BuildWire
#   file         : __init__.py
#   file_relpath : src/buildwire/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire CLI subcommands."""
