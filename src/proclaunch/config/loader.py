"""
Launcher configuration file discovery and reading.

The configuration path is taken, in order, from an explicit argument, the
``PROCLAUNCH_CONFIG`` environment variable, or ``conf/config.toml`` at the
repository root.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..validation import ErrorSeverity, ValidationError, handle_config_error

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PROCLAUNCH_CONFIG"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"


def resolve_config_path(config_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Work out which configuration file to read.

    Args:
        config_path: Explicit path, e.g. from ``--config``

    Returns:
        The explicit path, else ``$PROCLAUNCH_CONFIG``, else the bundled default
    """
    if config_path:
        return Path(config_path)

    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        logger.debug(f"Using configuration path from ${CONFIG_PATH_ENV}: {env_path}")
        return Path(env_path)

    return DEFAULT_CONFIG_PATH


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Read a launcher ``config.toml`` into a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file is not valid TOML; ``field_name`` holds
            the offending path
    """
    logger.info(f"Loading launcher configuration from: {config_path}")

    if not config_path.is_file():
        raise FileNotFoundError(f"Launcher configuration not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        error = ValidationError(
            f"Launcher configuration {config_path} is not valid TOML: {e}",
            field_name=str(config_path),
            severity=ErrorSeverity.CRITICAL,
        )
        handle_config_error(
            error=error,
            context="parsing launcher configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=False,
            logger=logger,
        )
        raise error from e
