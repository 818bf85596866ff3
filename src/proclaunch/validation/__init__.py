"""
Validation and error handling for the proclaunch package.

This module provides input validation for configuration and launch planning
together with consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    InvalidStateError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    MAX_CPU_INDEX,
    validate_command,
    validate_cpu_list,
    validate_positive_integer,
    validate_profile_id,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "InvalidStateError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "MAX_CPU_INDEX",
    "validate_command",
    "validate_cpu_list",
    "validate_positive_integer",
    "validate_profile_id",
]
