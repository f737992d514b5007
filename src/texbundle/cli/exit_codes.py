# topmark:header:start
#
#   project      : TexBundle
#   file         : exit_codes.py
#   file_relpath : src/texbundle/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TexBundle CLI.

Values follow the BSD `sysexits` convention where practical so that other
tooling can interpret failures consistently. Click's own usage errors (bad
flags, missing files for `click.Path(exists=True)`) exit with 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TexBundle CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid combination of arguments. Mirrors BSD ``EX_USAGE (64)``.
        UNKNOWN_BUNDLE: A requested bundle is not declared. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        CONFIG_ERROR: Unreadable or malformed declaration file. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    UNKNOWN_BUNDLE = 69  # EX_UNAVAILABLE
    CONFIG_ERROR = 78  # EX_CONFIG
