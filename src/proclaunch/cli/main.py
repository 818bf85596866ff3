"""
Command-line interface for the proclaunch launch helpers.

This module provides sub-commands for splitting command lines, computing
CPU affinity masks and printing the launch plan of a configured profile.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import get_config, set_config_path
from ..system.affinity import (
    mask_for_all_cpus,
    mask_from_booleans,
    mask_from_csv,
    mask_from_range,
)
from ..system.commands import build_launch_plan, split_command
from ..validation import (
    MAX_CPU_INDEX,
    ValidationError,
    handle_cli_error,
    validate_cpu_list,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

_TRUE_FLAGS = {"1", "true", "yes", "y", "on"}
_FALSE_FLAGS = {"0", "false", "no", "n", "off"}


def _parse_selection(selection: str) -> List[bool]:
    """Parse a CPU selection such as ``"1,0,1"`` into per-CPU flags."""
    flags = []
    for i, field in enumerate(selection.split(",")):
        value = field.strip().lower()
        if value in _TRUE_FLAGS:
            flags.append(True)
        elif value in _FALSE_FLAGS:
            flags.append(False)
        else:
            raise ValidationError(
                f"--select item {i} must be one of {sorted(_TRUE_FLAGS | _FALSE_FLAGS)}, got '{field}'",
                field_name="select",
                value=selection,
            )
    return flags


def _setup_logging(verbose: bool) -> None:
    """Configure root logging for a CLI run."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proclaunch",
        description="Prepare argument vectors and CPU affinity masks for launching processes.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser(
        "split", help="Split a command line into arguments, one per line."
    )
    split_parser.add_argument("command_line", help="The command line to split.")

    mask_parser = subparsers.add_parser(
        "mask", help="Compute a CPU affinity mask."
    )
    source = mask_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--cpus", type=str, help="Comma-separated CPU indices (e.g., '0,2,3')."
    )
    source.add_argument(
        "--range",
        type=int,
        nargs=2,
        metavar=("START", "STOP"),
        help="Half-open CPU range [START, STOP).",
    )
    source.add_argument(
        "--select", type=str, help="Per-CPU selection flags (e.g., '1,0,1,1')."
    )
    source.add_argument(
        "--all", action="store_true", help="Select every logical CPU on this machine."
    )
    mask_parser.add_argument(
        "--hex", action="store_true", help="Print the mask as hexadecimal."
    )

    plan_parser = subparsers.add_parser(
        "plan", help="Show the launch plan for a configured profile."
    )
    plan_parser.add_argument(
        "-p", "--profile", type=str, help="Profile id. Defaults to the configured default."
    )
    plan_parser.add_argument(
        "-c", "--config", type=Path, help="Path to config.toml."
    )
    plan_parser.add_argument(
        "--taskset",
        action="store_true",
        help="Build a taskset prefix even if the configuration disables it.",
    )
    return parser


def _run_split(args: argparse.Namespace) -> int:
    for token in split_command(args.command_line):
        print(token)
    return 0


def _run_mask(args: argparse.Namespace) -> int:
    if args.cpus is not None:
        mask = mask_from_csv(validate_cpu_list(args.cpus, field_name="cpus"))
    elif args.range is not None:
        start, stop = (
            validate_positive_integer(
                bound, min_value=0, max_value=MAX_CPU_INDEX + 1, field_name="range"
            )
            for bound in args.range
        )
        mask = mask_from_range(start, stop)
    elif args.select is not None:
        mask = mask_from_booleans(_parse_selection(args.select))
    else:
        mask = mask_for_all_cpus()

    print(format(mask, "x") if args.hex else mask)
    return 0


def _run_plan(args: argparse.Namespace) -> int:
    if args.config:
        set_config_path(args.config)

    launcher_config = get_config()
    profile = launcher_config.get_profile(args.profile)

    plan = build_launch_plan(
        profile.command,
        cpu_list=profile.cpu_list,
        setup_command=profile.setup_command,
        use_taskset=args.taskset or launcher_config.use_taskset,
    )

    print(f"Profile: {profile.profile_id} ({profile.display_name()})")
    print(f"Custom: {'yes' if profile.is_custom() else 'no'}")
    print(f"Arguments: {plan.argv}")
    print(f"Affinity mask: {plan.affinity_mask} (0x{plan.affinity_hex})")
    if plan.taskset_prefix:
        print(f"Taskset prefix: {plan.taskset_prefix.strip()}")
    if plan.shell_command:
        print(f"Shell command: {plan.shell_command}")
        if plan.shell_executable:
            print(f"Shell: {plan.shell_executable}")
    return 0


def main_cli(argv: Optional[List[str]] = None) -> int:
    """
    Main command-line interface for proclaunch.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.

    Raises:
        SystemExit: On configuration or validation errors.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    handlers = {
        "split": _run_split,
        "mask": _run_mask,
        "plan": _run_plan,
    }

    try:
        return handlers[args.command](args)
    except (ValidationError, FileNotFoundError, KeyError) as e:
        handle_cli_error(
            error=e,
            context=f"'{args.command}' command",
            exit_code=1,
            logger=logger,
        )
    return 1


if __name__ == "__main__":
    sys.exit(main_cli())
