"""
Data models for the launch helpers.

Configuration Models:
- Launch profiles and launcher settings

Runtime Models:
- Launch plans (argument vector plus CPU restriction)

Process Models:
- Passive records describing already-discovered processes
"""

from .config import (
    BUILTIN_PROFILE_IDS,
    COMPATIBILITY,
    CUSTOM,
    INTERMEDIATE,
    PERFORMANCE,
    STABILITY,
    LauncherConfig,
    LaunchProfile,
)
from .process import ProcessInfo
from .runtime import LaunchPlan

__all__ = [
    # Configuration
    "BUILTIN_PROFILE_IDS",
    "COMPATIBILITY",
    "CUSTOM",
    "INTERMEDIATE",
    "PERFORMANCE",
    "STABILITY",
    "LauncherConfig",
    "LaunchProfile",
    # Runtime
    "LaunchPlan",
    # Process
    "ProcessInfo",
]
