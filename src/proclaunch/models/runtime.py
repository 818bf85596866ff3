"""
Runtime data models.

This module contains the data structure produced when a launch is planned:
the argument vector and the CPU restriction handed to the process-spawning
layer.
"""

import dataclasses
from typing import List, Optional


@dataclasses.dataclass
class LaunchPlan:
    """Dataclass to hold the results of launch planning."""

    argv: List[str]
    affinity_mask: int
    affinity_hex: str
    cpus: List[int]
    # e.g. "taskset -c 0,2-3 ", empty when pinning is not requested
    taskset_prefix: str = ""

    # Set when a setup command has to run in a shell before the launch
    shell_command: Optional[str] = None
    shell_executable: Optional[str] = None

    @property
    def executable(self) -> str:
        """First element of the argument vector."""
        return self.argv[0]

    @property
    def has_affinity(self) -> bool:
        return self.affinity_mask != 0
