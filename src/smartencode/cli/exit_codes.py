"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success (including files that are skipped)
    1-9: General errors
    10-19: Validation errors (options, profiles)
    50-59: Input parse errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for SmartEncode CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    CONFIG_ERROR = 11
    PROFILE_NOT_FOUND = 12

    # Input errors (50-59)
    PARSE_ERROR = 51
