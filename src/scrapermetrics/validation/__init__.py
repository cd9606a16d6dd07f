"""
Validation and error handling for the scrapermetrics package.
"""

from .exceptions import (
    ErrorSeverity,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_file_error,
    handle_cli_error,
)
from .validators import (
    validate_directory_path,
    validate_enum_choice,
    validate_filename,
    validate_log_level,
)

__all__ = [
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "handle_cli_error",
    "validate_directory_path",
    "validate_enum_choice",
    "validate_filename",
    "validate_log_level",
]
