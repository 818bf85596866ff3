"""
Configuration data models.

This module contains the launch profile and launcher configuration data
structures loaded from ``config.toml``.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..validation.exceptions import InvalidStateError

STABILITY = "STABILITY"
COMPATIBILITY = "COMPATIBILITY"
INTERMEDIATE = "INTERMEDIATE"
PERFORMANCE = "PERFORMANCE"
CUSTOM = "CUSTOM"

BUILTIN_PROFILE_IDS = [STABILITY, COMPATIBILITY, INTERMEDIATE, PERFORMANCE]


@dataclass(eq=False)
class LaunchProfile:
    """
    A named launch command with an optional CPU restriction.

    ``profile_id`` is mandatory for anything that classifies the profile;
    ``name`` is purely descriptive.
    """

    profile_id: Optional[str]
    name: Optional[str]
    command: str = ""
    # Comma separated CPU indices, empty means no pinning
    cpu_list: str = ""
    setup_command: Optional[str] = None

    def is_custom(self) -> bool:
        """Return True for user-defined profiles (ids starting with ``CUSTOM``).

        Raises:
            InvalidStateError: If the profile has no id.
        """
        if self.profile_id is None:
            raise InvalidStateError(
                "Cannot classify a launch profile without an id",
                field_name="profile_id",
                value=None,
            )
        return self.profile_id.startswith(CUSTOM)

    def display_name(self) -> str:
        return self.name or ""

    def __str__(self) -> str:
        return self.display_name()


@dataclass
class LauncherConfig:
    """
    Launcher settings and the available profiles, loaded from ``config.toml``.
    """

    default_profile: str
    use_taskset: bool
    profiles: List[LaunchProfile] = field(default_factory=list)

    def get_profile(self, profile_id: Optional[str] = None) -> LaunchProfile:
        """Look up a profile by id, defaulting to ``default_profile``.

        Raises:
            KeyError: If no profile has the requested id.
        """
        wanted = profile_id or self.default_profile
        for profile in self.profiles:
            if profile.profile_id == wanted:
                return profile
        raise KeyError(
            f"Unknown launch profile '{wanted}'. Available: {[p.profile_id for p in self.profiles]}"
        )
