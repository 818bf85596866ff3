"""
Configuration validation utilities.

This module turns raw TOML data into validated launcher configuration
objects.
"""

import logging
from typing import Any, Dict, List

from ..models.config import LauncherConfig, LaunchProfile
from ..validation import (
    ValidationError,
    validate_command,
    validate_cpu_list,
    validate_profile_id,
)

logger = logging.getLogger(__name__)


def validate_profiles_config(profiles_data: List[Dict[str, Any]]) -> List[LaunchProfile]:
    """
    Validate the ``[[profiles]]`` tables and create LaunchProfile instances.

    Args:
        profiles_data: List of raw profile tables from TOML

    Returns:
        List of validated LaunchProfile instances

    Raises:
        ValidationError: If any profile is invalid
    """
    if not isinstance(profiles_data, list):
        raise ValidationError("profiles must be a list of tables")

    profiles = []
    seen_ids: List[str] = []

    for i, profile_data in enumerate(profiles_data):
        if not isinstance(profile_data, dict):
            raise ValidationError(f"profiles[{i}] must be a table")

        profile_id = validate_profile_id(
            profile_data.get("id"),
            existing_ids=seen_ids,
            field_name=f"profiles[{i}].id",
        )
        seen_ids.append(profile_id)

        name = profile_data.get("name")
        if name is not None and not isinstance(name, str):
            raise ValidationError(
                f"profiles[{i}].name must be a string",
                field_name=f"profiles[{i}].name",
                value=name,
            )

        command = validate_command(
            profile_data.get("command"), field_name=f"profiles[{i}].command"
        )
        cpu_list = validate_cpu_list(
            profile_data.get("cpu_list", ""), field_name=f"profiles[{i}].cpu_list"
        )

        # An empty setup command in TOML means "none"
        setup_command = profile_data.get("setup_command") or None
        if setup_command is not None and not isinstance(setup_command, str):
            raise ValidationError(
                f"profiles[{i}].setup_command must be a string",
                field_name=f"profiles[{i}].setup_command",
                value=setup_command,
            )

        profiles.append(
            LaunchProfile(
                profile_id=profile_id,
                name=name,
                command=command,
                cpu_list=cpu_list,
                setup_command=setup_command,
            )
        )

    return profiles


def validate_launcher_config(config_data: Dict[str, Any]) -> LauncherConfig:
    """
    Validate and create a LauncherConfig from the parsed main config.

    Args:
        config_data: Parsed ``config.toml`` contents

    Returns:
        Validated LauncherConfig instance

    Raises:
        ValidationError: If validation fails
    """
    launcher_settings = config_data.get("launcher", {})
    if not isinstance(launcher_settings, dict):
        raise ValidationError(
            f"[launcher] must be a table, got {type(launcher_settings).__name__}",
            field_name="launcher",
            value=launcher_settings,
        )
    profiles = validate_profiles_config(config_data.get("profiles", []))

    if not profiles:
        raise ValidationError("At least one [[profiles]] entry is required")

    use_taskset = launcher_settings.get("use_taskset", False)
    if not isinstance(use_taskset, bool):
        raise ValidationError(
            "launcher.use_taskset must be a boolean",
            field_name="launcher.use_taskset",
            value=use_taskset,
        )

    profile_ids = [p.profile_id for p in profiles]
    default_profile = launcher_settings.get("default_profile", profile_ids[0])
    if default_profile not in profile_ids:
        raise ValidationError(
            f"launcher.default_profile '{default_profile}' does not match any profile. "
            f"Available: {profile_ids}",
            field_name="launcher.default_profile",
            value=default_profile,
        )

    logger.debug(f"Validated {len(profiles)} launch profiles, default '{default_profile}'")

    return LauncherConfig(
        default_profile=default_profile,
        use_taskset=use_taskset,
        profiles=profiles,
    )
