# topmark:header:start
#
#   project      : FeatureDocs
#   file         : exit_codes.py
#   file_relpath : src/featuredocs/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FeatureDocs CLI.

FeatureDocs aligns with the BSD `sysexits` convention so that other tooling
(CI jobs, pre-commit hooks) can tell an invalid document apart from a broken
configuration or a usage mistake.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FeatureDocs CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: One or more documents are invalid. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Content directory or document does not exist. Mirrors
            BSD ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: A template failed to render. Mirrors BSD ``EX_SOFTWARE (70)``.
        CANT_CREATE: Refusing to overwrite an existing file. Mirrors BSD
            ``EX_CANTCREAT (73)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: A config file is unreadable or not valid TOML. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    CANT_CREATE = 73  # EX_CANTCREAT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
