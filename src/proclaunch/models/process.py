"""
Process record model.

A passive description of an already-discovered process. Discovery itself is
left to the caller (typically psutil); this module only holds the values.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import psutil

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True, eq=False)
class ProcessInfo:
    """
    Immutable record of a process id, its parent id and its name.

    Ids are stored as given, so zero and negative values round-trip. Records
    compare by identity: two records built from the same values are distinct.
    """

    pid: int
    ppid: int
    name: Optional[str]

    @classmethod
    def from_psutil(cls, proc: psutil.Process) -> "ProcessInfo":
        """Build a record from a psutil process handle.

        Fields that cannot be read because the process exited or access was
        denied fall back to ``0`` (ppid) or ``None`` (name).
        """
        try:
            ppid = proc.ppid()
        except psutil.Error as e:
            logger.debug(f"Could not read ppid of PID {proc.pid}: {type(e).__name__}: {e}")
            ppid = 0

        try:
            name = proc.name()
        except psutil.Error as e:
            logger.debug(f"Could not read name of PID {proc.pid}: {type(e).__name__}: {e}")
            name = None

        return cls(pid=proc.pid, ppid=ppid, name=name)
