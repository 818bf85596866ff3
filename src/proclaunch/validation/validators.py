"""
Validation functions for configuration and launch input.

The pure tokenizer and mask helpers never validate their input; these
functions are used at the edges (configuration loading, launch planning and
the CLI) where bad input should be reported instead of silently degraded.
"""

import re
from typing import Any, List, Optional

from .exceptions import ValidationError

_CPU_LIST_FIELD = re.compile(r"^[0-9]+$")
_PROFILE_ID = re.compile(r"^[A-Za-z0-9_-]+$")

# Highest CPU index accepted at the edges; Linux cpu_set_t holds 1024 CPUs
MAX_CPU_INDEX = 1023


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    # bool is an int subclass, but True is never a meaningful CPU index
    if isinstance(value, bool):
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


def validate_cpu_list(cpu_list: Any, field_name: str = "cpu_list",
                      allow_empty: bool = True) -> str:
    """
    Validate a CPU list such as ``"0,2,3"``.

    Whitespace around each comma-separated field is tolerated and removed
    from the returned value.

    Args:
        cpu_list: CPU list string
        field_name: Name of the field being validated
        allow_empty: Whether an empty string (no pinning) is acceptable

    Returns:
        Normalized CPU list string

    Raises:
        ValidationError: If the format is invalid
    """
    if cpu_list is None:
        cpu_list = ""
    if not isinstance(cpu_list, str):
        raise ValidationError(
            f"{field_name} must be a string, got {type(cpu_list).__name__}",
            field_name=field_name,
            value=cpu_list
        )

    stripped = cpu_list.strip()
    if not stripped:
        if allow_empty:
            return ""
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=cpu_list
        )

    fields = [part.strip() for part in stripped.split(",")]
    for part in fields:
        if not _CPU_LIST_FIELD.match(part):
            raise ValidationError(
                f"{field_name} must be comma-separated CPU indices (e.g. '0,2,3'): {cpu_list}",
                field_name=field_name,
                value=cpu_list
            )
        validate_positive_integer(
            part, min_value=0, max_value=MAX_CPU_INDEX, field_name=field_name
        )

    return ",".join(fields)


def validate_profile_id(profile_id: Any, existing_ids: Optional[List[str]] = None,
                        field_name: str = "profile_id") -> str:
    """
    Validate a launch profile identifier.

    Raises:
        ValidationError: If the id is empty, malformed or already taken
    """
    if not profile_id or not isinstance(profile_id, str):
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=profile_id
        )

    if not _PROFILE_ID.match(profile_id):
        raise ValidationError(
            f"{field_name} must contain only alphanumeric characters, underscores, and hyphens: {profile_id}",
            field_name=field_name,
            value=profile_id
        )

    if existing_ids and profile_id in existing_ids:
        raise ValidationError(
            f"{field_name} must be unique, '{profile_id}' already exists",
            field_name=field_name,
            value=profile_id
        )

    return profile_id


def validate_command(command: Any, field_name: str = "command") -> str:
    """
    Validate that a launch command names at least one argument.

    Raises:
        ValidationError: If the command is not a string or has no tokens
    """
    from ..system.commands import split_command

    if not isinstance(command, str):
        raise ValidationError(
            f"{field_name} must be a string",
            field_name=field_name,
            value=command
        )

    if not split_command(command):
        raise ValidationError(
            f"{field_name} must contain at least one argument",
            field_name=field_name,
            value=command
        )

    return command
