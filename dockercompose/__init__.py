"""dockercompose — Python binding for the docker-compose command-line tool.

Uses the docker-compose executable, which must be installed and working.

    from dockercompose import up, down

    result = up(compose_path="deploy/docker-compose.yml", service=["web"])
    if not result.ok:
        print(result.exit_code, result.output)
"""
from __future__ import annotations

__version__ = "0.1.0"

from .command import Operation, build_args
from .compose import down, restart, run, start, stop, up
from .executable import resolve_executable, set_executable
from .options import ComposeOptions
from .runner import (
    ComposeError,
    ComposeFailure,
    ComposeResult,
    ComposeStartupError,
    ComposeSuccess,
)

__all__ = [
    "ComposeError",
    "ComposeFailure",
    "ComposeOptions",
    "ComposeResult",
    "ComposeStartupError",
    "ComposeSuccess",
    "Operation",
    "build_args",
    "down",
    "resolve_executable",
    "restart",
    "run",
    "set_executable",
    "start",
    "stop",
    "up",
]
