"""
Validation and error handling for the dumpstats package.

This module provides the exception taxonomy shared by the decoder, reporter
and command-line interface, plus input validators with consistent error
reporting.
"""

from .exceptions import (
    DecodeError,
    DumpStatsError,
    ErrorSeverity,
    InvalidLengthError,
    MalformedTagError,
    TruncatedInputError,
    UsageError,
    ValidationError,
    handle_cli_error,
    handle_error,
)

from .validators import (
    validate_path_exists,
    validate_positive_integer,
)

__all__ = [
    # Exceptions
    "DumpStatsError",
    "UsageError",
    "ValidationError",
    "DecodeError",
    "TruncatedInputError",
    "MalformedTagError",
    "InvalidLengthError",
    # Error handling
    "ErrorSeverity",
    "handle_error",
    "handle_cli_error",
    # Validators
    "validate_path_exists",
    "validate_positive_integer",
]
