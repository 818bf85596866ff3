"""
Configuration management for the proclaunch package.

This module provides a clean interface for loading, validating, and accessing
launcher configuration from a TOML file with singleton pattern management.
"""

# Main configuration interface
from .manager import (
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    set_config_path,
)

# For advanced usage - direct access to loaders and validators
from .loader import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    load_config_file,
    resolve_config_path,
)
from .validators import (
    validate_launcher_config,
    validate_profiles_config,
)

__all__ = [
    # Main interface
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    # Advanced interface
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "load_config_file",
    "resolve_config_path",
    "validate_launcher_config",
    "validate_profiles_config",
]
