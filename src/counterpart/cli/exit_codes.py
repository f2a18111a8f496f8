# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/counterpart/cli/exit_codes.py
#   project      : Counterpart
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Counterpart CLI.

Counterpart aligns with the BSD `sysexits` convention so that editor
integrations and shell scripts can tell failures apart. Finding no companion
is not a failure and exits with `SUCCESS`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Counterpart CLI.

    Attributes:
        SUCCESS: A companion was launched, or no companion exists.
        FAILURE: Generic failure, e.g. the editor could not be started.
        USAGE_ERROR: Malformed input path or invalid flags. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
