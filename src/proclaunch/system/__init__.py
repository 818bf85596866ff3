"""
System interaction utilities for launching processes.

This module provides the pieces a process launcher needs before it calls into
the operating system:

- Command line tokenizing that respects quotes and escaped spaces
- CPU affinity masks from index lists, selection flags and ranges
- Launch planning that combines both with optional taskset and setup commands

Everything here is pure computation; spawning and pinning the process is
left to the caller.
"""

# Command tokenizing and launch preparation
from .commands import (
    QuoteState,
    build_launch_plan,
    prepare_command_with_setup,
    split_command,
    tokenize,
)

# CPU affinity masks
from .affinity import (
    cpus_from_mask,
    format_cpu_list,
    mask_as_hex_string,
    mask_for_all_cpus,
    mask_from_booleans,
    mask_from_csv,
    mask_from_range,
)

__all__ = [
    # Commands
    "QuoteState",
    "build_launch_plan",
    "prepare_command_with_setup",
    "split_command",
    "tokenize",
    # Affinity
    "cpus_from_mask",
    "format_cpu_list",
    "mask_as_hex_string",
    "mask_for_all_cpus",
    "mask_from_booleans",
    "mask_from_csv",
    "mask_from_range",
]
