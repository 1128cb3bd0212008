# buildwire:header:start
#
#   project      : BuildWire
#   file         : exit_codes.py
#   file_relpath : src/buildwire/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Exit codes for the BuildWire CLI.

BuildWire aligns with the BSD `sysexits` convention where practical, so that
build tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BuildWire CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; also "false" for predicate commands
            such as ``env is-primary``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Environment value is not valid text. Mirrors BSD
            ``EX_DATAERR (65)``.
        NOT_PRESENT: Environment variable is not set. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    NOT_PRESENT = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

