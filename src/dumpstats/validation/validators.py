"""
Validation functions for command-line and tool arguments.
"""

import os
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import ValidationError


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate (an int or its decimal text, never a float)
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    # Only ints and decimal text are accepted; int() would truncate a float
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid integer, got {value}",
            field_name=field_name,
            value=value
        )
    if int_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and int_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {int_value}",
            field_name=field_name,
            value=value
        )
    return int_value


def validate_path_exists(path: Union[str, Path], field_name: str = "path") -> Path:
    """
    Validate that a path exists and refers to a regular file.

    Args:
        path: Path to validate
        field_name: Name of the field being validated

    Returns:
        Validated path

    Raises:
        ValidationError: If the path doesn't exist or is a directory
    """
    path_str = str(path)
    if not os.path.exists(path_str):
        raise ValidationError(
            f"{field_name} does not exist: {path_str}",
            field_name=field_name,
            value=path_str
        )
    if os.path.isdir(path_str):
        raise ValidationError(
            f"{field_name} is a directory, expected a file: {path_str}",
            field_name=field_name,
            value=path_str
        )
    return Path(path_str)

