"""Public docker-compose operations.

Every operation accepts the same keyword options:
    always_yes=True       answer "yes" to all interactive questions
    compose_path=path     compose file, if not in the standard location
    project_name=name     compose project name
    service=name|[names]  services to act on (all when omitted; ignored by down)
    into=sink             writable object that receives the output

and returns ComposeSuccess(output) or ComposeFailure(exit_code, output).
"""
from __future__ import annotations

from typing import Any, Mapping

from .command import Operation, build_args
from .options import ComposeOptions
from .runner import ComposeResult, execute


def run(
    operation: Operation | str,
    options: ComposeOptions | Mapping[str, Any] | None = None,
    /,
    **kwargs: Any,
) -> ComposeResult:
    """Run a docker-compose operation and return its result."""
    if options is None:
        opts = ComposeOptions.from_mapping(kwargs)
    elif isinstance(options, ComposeOptions):
        if kwargs:
            raise TypeError("Pass either a ComposeOptions instance or keyword options, not both")
        opts = options
    else:
        opts = ComposeOptions.from_mapping({**options, **kwargs})
    return execute(build_args(operation, opts), opts)


def up(**opts: Any) -> ComposeResult:
    """docker-compose up, detached.

    Returns after the command finishes, which can take a while if images
    need to be pulled. Also accepts force_recreate=True and remove_orphans=True.
    """
    return run(Operation.UP, **opts)


def down(**opts: Any) -> ComposeResult:
    """docker-compose down. Also accepts remove_orphans=True."""
    return run(Operation.DOWN, **opts)


def restart(**opts: Any) -> ComposeResult:
    return run(Operation.RESTART, **opts)


def stop(**opts: Any) -> ComposeResult:
    return run(Operation.STOP, **opts)


def start(**opts: Any) -> ComposeResult:
    """docker-compose start.

    Only starts previously created and stopped services; use up() to create them.
    """
    return run(Operation.START, **opts)
