# topmark:header:start
#
#   project      : MultipartForm
#   file         : exit_codes.py
#   file_relpath : src/multipartform/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Exit codes for the MultipartForm CLI.

Codes follow the BSD ``sysexits`` convention where practical, so that shell
scripts can tell a rejected upload from a bad invocation or a broken config.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MultipartForm CLI.

    Attributes:
        SUCCESS: The command completed and the input was accepted.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid invocation, including an unknown file type name.
            Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The input was rejected (validation or encoding failure).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: The input could not be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration value. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
