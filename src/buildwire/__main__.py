# buildwire:header:start
#
#   project      : BuildWire
#   file         : __main__.py
#   file_relpath : src/buildwire/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Allow ``python -m buildwire`` to run the CLI."""

from buildwire.cli.main import cli

if __name__ == "__main__":
    cli()
