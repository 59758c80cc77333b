"""Argument assembly for docker-compose subcommands.

The resulting vector is positional: wrapper flags, then --ansi never, then
compose flags, the subcommand, its flags and finally service names.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path

from .options import ComposeOptions


class Operation(str, Enum):
    UP = "up"
    DOWN = "down"
    RESTART = "restart"
    STOP = "stop"
    START = "start"


# Operations that accept trailing service names.
_SERVICE_OPERATIONS = (Operation.UP, Operation.RESTART, Operation.STOP, Operation.START)


def to_operation(operation: Operation | str) -> Operation:
    try:
        return Operation(operation)
    except ValueError:
        valid = [op.value for op in Operation]
        raise ValueError(
            f"Unknown docker-compose operation '{operation}'. Available: {valid}"
        ) from None


def wrapper_args(options: ComposeOptions) -> list[str]:
    return ["--always-yes"] if options.always_yes is True else []


def compose_args(options: ComposeOptions) -> list[str]:
    args: list[str] = []
    for key in options.compose_flag_order:
        if key == "compose_path" and options.compose_path:
            args += ["-f", Path(options.compose_path).name]
        elif key == "project_name" and options.project_name:
            args += ["-p", options.project_name]
    return args


def operation_args(operation: Operation, options: ComposeOptions) -> list[str]:
    args: list[str] = []
    if operation is Operation.UP:
        if options.force_recreate is True:
            args.append("--force-recreate")
        if options.remove_orphans is True:
            args.append("--remove-orphans")
        args += ["-d", "--no-color"]
    elif operation is Operation.DOWN:
        if options.remove_orphans is True:
            args.append("--remove-orphans")
    if operation in _SERVICE_OPERATIONS:
        args += options.services
    return args


def build_args(operation: Operation | str, options: ComposeOptions) -> list[str]:
    """Return the full docker-compose argument vector (without the executable)."""
    op = to_operation(operation)
    return [
        *wrapper_args(options),
        "--ansi",
        "never",
        *compose_args(options),
        op.value,
        *operation_args(op, options),
    ]


def working_dir(options: ComposeOptions) -> Path | None:
    """Directory docker-compose runs in: the compose file's parent, if given."""
    if not options.compose_path:
        return None
    return Path(options.compose_path).parent
