"""
CPU affinity mask utilities.

This module converts CPU selections into integer affinity masks where bit
``i`` set means the process may run on CPU ``i``. Selections can be given as a
comma-separated index list (``"0,2,3"``), a sequence of per-CPU booleans, or a
half-open ``[start, stop)`` range.

All functions are pure and never raise: absent or malformed input simply
contributes no bits. Fitting the mask into whatever integer width the OS call
expects is up to the caller.
"""

import logging
from typing import Iterable, List, Optional, Sequence

import psutil

logger = logging.getLogger(__name__)


def _parse_cpu_index(field: str) -> Optional[int]:
    """Parse one field of a CPU list, returning None when it is not an index."""
    field = field.strip()
    if not (field.isascii() and field.isdigit()):
        return None
    return int(field)


def mask_from_csv(cpu_list: Optional[str]) -> int:
    """Build an affinity mask from a comma-separated list of CPU indices.

    Whitespace around each field is ignored. Fields that are not
    runs of ASCII digits are skipped.

    Args:
        cpu_list: String such as ``"0,1,2"``, or None.

    Returns:
        The mask; 0 for None or an empty string.

    Examples:
        >>> mask_from_csv("0,2")
        5
        >>> mask_from_csv(None)
        0
    """
    mask = 0
    if not cpu_list:
        return mask

    for field in cpu_list.split(","):
        cpu = _parse_cpu_index(field)
        if cpu is None:
            logger.debug(f"Skipping invalid CPU index '{field}' in '{cpu_list}'")
            continue
        mask |= 1 << cpu
    return mask


def mask_from_booleans(selection: Sequence[bool]) -> int:
    """Build an affinity mask from per-CPU selection flags.

    Examples:
        >>> mask_from_booleans([True, False, True, False])
        5
    """
    mask = 0
    for cpu, selected in enumerate(selection):
        if selected:
            mask |= 1 << cpu
    return mask


def mask_from_range(start: int, stop: int) -> int:
    """Build an affinity mask selecting every CPU in ``[start, stop)``.

    An empty or inverted range (``start >= stop``) yields 0. Negative
    indices have no bit and are left out.

    Examples:
        >>> mask_from_range(2, 4)
        12
        >>> mask_from_range(4, 2)
        0
    """
    if start >= stop:
        return 0

    low = max(start, 0)
    if low >= stop:
        return 0
    return ((1 << (stop - low)) - 1) << low


def mask_as_hex_string(cpu_list: Optional[str]) -> str:
    """Render the mask of a CPU list as lowercase hex without prefix.

    Examples:
        >>> mask_as_hex_string("0,1,2,3,4,5,6,7")
        'ff'
        >>> mask_as_hex_string("7")
        '80'
        >>> mask_as_hex_string("")
        '0'
    """
    return format(mask_from_csv(cpu_list), "x")


def cpus_from_mask(mask: int) -> List[int]:
    """Return the CPU indices selected by a mask, in ascending order."""
    cpus = []
    if mask <= 0:
        return cpus

    cpu = 0
    while mask:
        if mask & 1:
            cpus.append(cpu)
        mask >>= 1
        cpu += 1
    return cpus


def format_cpu_list(cpus: Iterable[int]) -> str:
    """Format CPU indices into a compact list suitable for ``taskset -c``.

    Examples:
        >>> format_cpu_list({0, 2, 3, 4})
        '0,2-4'
        >>> format_cpu_list([])
        ''
    """
    sorted_cpus = sorted(set(cpus))
    if not sorted_cpus:
        return ""

    ranges = []
    start = end = sorted_cpus[0]

    for cpu in sorted_cpus[1:]:
        if cpu == end + 1:
            end = cpu
        else:
            ranges.append(str(start) if start == end else f"{start}-{end}")
            start = end = cpu
    ranges.append(str(start) if start == end else f"{start}-{end}")

    return ",".join(ranges)


def mask_for_all_cpus() -> int:
    """Return a mask selecting every logical CPU on this machine."""
    total_cpus = psutil.cpu_count(logical=True)
    if not total_cpus:
        logger.warning("psutil could not determine the CPU count, assuming a single CPU")
        total_cpus = 1
    return mask_from_range(0, total_cpus)
