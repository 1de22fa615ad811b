# topmark:header:start
#
#   project      : NumStrKit
#   file         : exit_codes.py
#   file_relpath : src/numstrkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the NumStrKit CLI.

NumStrKit aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. Click's own parameter errors keep Click's
exit status 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the NumStrKit CLI.

    Attributes:
        SUCCESS: Every value was processed.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: At least one input value could not be parsed, rounded or
            formatted. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Configuration error (unreadable, malformed or invalid
            config). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
