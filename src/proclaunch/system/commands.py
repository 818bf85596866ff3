"""
Command line tokenizing and launch preparation utilities.

This module splits launch commands into argument vectors and combines them
with a CPU affinity restriction and optional setup commands into a launch
plan. Nothing here spawns a process; the plan is handed to the caller.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from ..models.runtime import LaunchPlan
from ..validation.exceptions import ValidationError
from .affinity import cpus_from_mask, format_cpu_list, mask_from_csv

logger = logging.getLogger(__name__)


class QuoteState(Enum):
    """Quoting mode of the tokenizer."""
    NONE = "none"
    SINGLE = "'"
    DOUBLE = '"'


_QUOTE_STATES = {"'": QuoteState.SINGLE, '"': QuoteState.DOUBLE}


def split_command(command: Optional[str]) -> List[str]:
    """Split a command string into arguments, respecting quotes and escaped spaces.

    Whitespace separates arguments only outside quotes. Quote characters are
    kept in the resulting tokens, so ``echo "a b"`` gives ``['echo', '"a b"']``.
    Outside quotes a backslash followed by whitespace embeds that whitespace
    in the current token; every other backslash is kept as is. An unclosed
    quote runs to the end of the string and is returned as the last token.

    Args:
        command: The command line, or None.

    Returns:
        List of argument tokens. Empty for None, empty or blank input.

    Examples:
        >>> split_command('echo "hello world"')
        ['echo', '"hello world"']
        >>> split_command('cd /path\\\\ with\\\\ spaces')
        ['cd', '/path with spaces']
        >>> split_command("")
        []
    """
    tokens: List[str] = []
    if not command:
        return tokens

    current: List[str] = []
    # Distinguishes a started token from no token; quotes alone form a token
    in_token = False
    state = QuoteState.NONE
    length = len(command)
    i = 0

    while i < length:
        char = command[i]

        if state is QuoteState.NONE:
            if char == "\\" and i + 1 < length and command[i + 1].isspace():
                current.append(command[i + 1])
                in_token = True
                i += 2
                continue
            if char.isspace():
                if in_token:
                    tokens.append("".join(current))
                    current = []
                    in_token = False
            else:
                if char in _QUOTE_STATES:
                    state = _QUOTE_STATES[char]
                current.append(char)
                in_token = True
        else:
            current.append(char)
            if char == state.value:
                state = QuoteState.NONE
        i += 1

    if in_token:
        if state is not QuoteState.NONE:
            logger.debug(f"Unclosed {state.name.lower()} quote in command: {command}")
        tokens.append("".join(current))

    return tokens


tokenize = split_command


def prepare_command_with_setup(
    main_command: str, setup_command: Optional[str]
) -> Tuple[str, Optional[str]]:
    """Combine a main command with an optional setup command.

    Args:
        main_command: The primary command to execute.
        setup_command: Optional setup command to run first
            (e.g., "source env.sh").

    Returns:
        Tuple of (final_command_string, shell_executable).
        shell_executable is the required shell path or None for default shell.

    Examples:
        >>> prepare_command_with_setup("wine app.exe", "source env.sh")
        ('source env.sh && wine app.exe', None)
        >>> prepare_command_with_setup("wine app.exe", None)
        ('wine app.exe', None)
    """
    if setup_command:
        final_command = f"{setup_command} && {main_command}"
        if "/bin/bash" in setup_command:
            executable = "/bin/bash"
        else:
            executable = None
        return final_command, executable
    return main_command, None


def build_launch_plan(
    command: str,
    cpu_list: Optional[str] = None,
    setup_command: Optional[str] = None,
    use_taskset: bool = False,
) -> LaunchPlan:
    """Prepare everything needed to launch a command on a set of CPUs.

    Args:
        command: Launch command line.
        cpu_list: Comma-separated CPU indices to restrict the process to.
            None or empty means no restriction.
        setup_command: Optional command to run in a shell before launching.
        use_taskset: Whether to build a ``taskset -c`` prefix for the
            restriction.

    Returns:
        LaunchPlan with the argument vector, mask and optional shell command.

    Raises:
        ValidationError: If the command contains no arguments.
    """
    argv = split_command(command)
    if not argv:
        raise ValidationError(
            "Launch command must contain at least one argument",
            field_name="command",
            value=command,
        )

    mask = mask_from_csv(cpu_list)
    cpus = cpus_from_mask(mask)

    taskset_prefix = ""
    if use_taskset and cpus:
        taskset_prefix = f"taskset -c {format_cpu_list(cpus)} "

    shell_command = None
    shell_executable = None
    if setup_command:
        shell_command, shell_executable = prepare_command_with_setup(
            f"{taskset_prefix}{command}", setup_command
        )

    logger.debug(
        f"Planned launch of '{argv[0]}' with {len(argv) - 1} argument(s), "
        f"affinity mask {mask:#x}"
    )

    return LaunchPlan(
        argv=argv,
        affinity_mask=mask,
        affinity_hex=format(mask, "x"),
        cpus=cpus,
        taskset_prefix=taskset_prefix,
        shell_command=shell_command,
        shell_executable=shell_executable,
    )
