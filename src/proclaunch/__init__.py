"""
proclaunch: helpers for preparing process launches.

This package turns user or configuration supplied launch settings into the
values a process launcher passes to the operating system:

- system: command line tokenizing, CPU affinity masks and launch planning
- models: process records, launch profiles and launch plans
- config: TOML configuration loading and validation
- validation: input validation and error handling
- cli: command-line interface

Usage:
    From command line:
        proclaunch split 'wine "C:\\Program Files\\app.exe" --fullscreen'
        proclaunch mask --cpus 0,2 --hex

    Programmatically:
        from proclaunch import split_command, mask_from_csv
        argv = split_command(command)
        mask = mask_from_csv("0,1")
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .cli import main_cli

# Model classes for external use
from .models import (
    LaunchPlan,
    LaunchProfile,
    LauncherConfig,
    ProcessInfo,
)

# Validation utilities
from .validation import (
    InvalidStateError,
    ValidationError,
)

# System utilities
from .system import (
    build_launch_plan,
    cpus_from_mask,
    format_cpu_list,
    mask_as_hex_string,
    mask_for_all_cpus,
    mask_from_booleans,
    mask_from_csv,
    mask_from_range,
    split_command,
    tokenize,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "main_cli",
    # Models
    "LaunchPlan",
    "LaunchProfile",
    "LauncherConfig",
    "ProcessInfo",
    # Validation
    "InvalidStateError",
    "ValidationError",
    # System utilities
    "build_launch_plan",
    "cpus_from_mask",
    "format_cpu_list",
    "mask_as_hex_string",
    "mask_for_all_cpus",
    "mask_from_booleans",
    "mask_from_csv",
    "mask_from_range",
    "split_command",
    "tokenize",
]
