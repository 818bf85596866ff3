"""
Configuration management and singleton pattern.

This module provides the main configuration loading interface, ensuring the
configuration file is read and validated only once.
"""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import LauncherConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_config_file, resolve_config_path
from .validators import validate_launcher_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[LauncherConfig] = None

# Explicit configuration path; None defers to resolve_config_path().
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Clears any cached configuration so the next get_config() call reloads
    from the new path.

    Args:
        config_path: Path to the main config.toml file
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """Clear the cached configuration, forcing a reload on next access."""
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def _load_config(config_path: Path) -> LauncherConfig:
    """
    Load and validate the launcher configuration.

    Raises:
        FileNotFoundError: If the configuration file is missing
        ValidationError: If configuration validation fails
    """
    try:
        config_data = load_config_file(config_path)
        launcher_config = validate_launcher_config(config_data)

        logger.info(
            f"Successfully loaded configuration with {len(launcher_config.profiles)} launch profiles"
        )
        return launcher_config

    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except Exception as e:
        handle_config_error(
            error=e,
            context="processing configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> LauncherConfig:
    """
    Get the global launcher configuration, loading it if necessary.

    Returns:
        The singleton LauncherConfig instance
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config(resolve_config_path(_CONFIG_FILE_PATH))
    return _CONFIG


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(resolve_config_path(_CONFIG_FILE_PATH)),
        "profiles_count": len(_CONFIG.profiles) if _CONFIG else 0,
        "default_profile": _CONFIG.default_profile if _CONFIG else None,
    }
