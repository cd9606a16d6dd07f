"""
Validation functions for configuration values.
"""

from pathlib import Path
from typing import Any, List

from .exceptions import ValidationError


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value"
) -> str:
    """
    Validate that a value is one of an allowed set of strings.

    Args:
        value: Value to validate
        valid_choices: Allowed values
        field_name: Name of the field being validated

    Returns:
        The validated string

    Raises:
        ValidationError: If the value is not a string or not an allowed choice
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, got {type(value).__name__}",
            field_name=field_name,
            value=value
        )
    if value not in valid_choices:
        raise ValidationError(
            f"{field_name} must be one of {valid_choices}, got '{value}'",
            field_name=field_name,
            value=value
        )
    return value


def validate_log_level(value: Any, field_name: str = "log_level") -> str:
    """Validate a logging level name, returning it upper-cased."""
    level = value.upper() if isinstance(value, str) else value
    return validate_enum_choice(
        level,
        valid_choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        field_name=field_name,
    )


def validate_filename(value: Any, field_name: str = "filename") -> str:
    """
    Validate a bare file name (no directory components).

    Raises:
        ValidationError: If the value is empty or contains a path separator
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    if Path(value).name != value:
        raise ValidationError(
            f"{field_name} must be a file name without directories, got '{value}'",
            field_name=field_name,
            value=value
        )
    return value


def validate_directory_path(value: Any, base_dir: Path, field_name: str = "directory") -> Path:
    """
    Resolve a directory path, relative paths being taken from base_dir.

    The directory does not need to exist yet.

    Raises:
        ValidationError: If the value is empty or names an existing non-directory
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=value
        )
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    if path.exists() and not path.is_dir():
        raise ValidationError(
            f"{field_name} exists but is not a directory: {path}",
            field_name=field_name,
            value=value
        )
    return path
