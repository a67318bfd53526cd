"""
Exception hierarchy and error handling helpers.

This module defines every error the tool can raise while parsing arguments or
decoding a heap dump, together with the small helpers used to log an error
consistently before re-raising it or terminating the process.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DumpStatsError(Exception):
    """Base class for all errors raised by dumpstats."""


class UsageError(DumpStatsError):
    """Raised when the command line does not match the expected invocation."""


class ValidationError(DumpStatsError):
    """
    Exception raised when validation of a user-supplied value fails.

    Attributes:
        field_name: Name of the argument or field that failed validation
        value: The offending value
        severity: How loudly the failure should be reported
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class DecodeError(DumpStatsError):
    """
    Base class for failures while decoding a heap dump stream.

    Attributes:
        offset: Byte offset in the stream at which the failing read started,
            or None when unknown
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)
        self.offset = offset


class TruncatedInputError(DecodeError):
    """Raised when the stream ends in the middle of an integer or string."""

    def __init__(self, expected: int, received: int, offset: Optional[int] = None):
        super().__init__(
            f"Truncated input: expected {expected} bytes, got {received}", offset
        )
        self.expected = expected
        self.received = received


class MalformedTagError(DecodeError):
    """Raised when a byte outside the known tag set appears where a tag is expected."""

    def __init__(self, tag: int, offset: Optional[int] = None):
        super().__init__(f"Malformed tag: {tag}", offset)
        self.tag = tag


class InvalidLengthError(DecodeError):
    """Raised when a length-prefixed string announces a negative length."""

    def __init__(self, length: int, offset: Optional[int] = None):
        super().__init__(f"Invalid string length: {length}", offset)
        self.length = length


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a CLI-level error and terminate the process."""
    exit_code = kwargs.pop('exit_code', 1)
    include_traceback = kwargs.pop('include_traceback', False)

    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    if include_traceback:
        severity = ErrorSeverity.CRITICAL
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
