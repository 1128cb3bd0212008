# buildwire:header:start
#
#   project      : BuildWire
#   file         : __init__.py
#   file_relpath : src/buildwire/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Click-based command line interface for BuildWire."""
