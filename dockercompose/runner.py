"""Subprocess invocation of docker-compose.

A call runs to completion synchronously. stderr is merged into stdout and
streamed into the output sink. A non-zero exit is a ComposeFailure result,
not an exception; only a failure to start the process raises.
"""
from __future__ import annotations

import io
import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import IO, Any, Union, cast

from .command import working_dir
from .executable import resolve_executable
from .options import ComposeOptions

logger = logging.getLogger("dockercompose.runner")


class ComposeError(Exception):
    """Raised for docker-compose failures the caller asked to be raised."""

    def __init__(self, message: str, exit_code: int | None = None, output: Any = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output


class ComposeStartupError(ComposeError):
    """Raised when the docker-compose executable cannot be started at all."""


@dataclass
class ComposeSuccess:
    output: Any
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return True

    def raise_for_status(self) -> None:
        return None


@dataclass
class ComposeFailure:
    exit_code: int
    output: Any

    @property
    def ok(self) -> bool:
        return False

    def raise_for_status(self) -> None:
        raise ComposeError(
            f"docker-compose exited with code {self.exit_code}",
            exit_code=self.exit_code,
            output=self.output,
        )


ComposeResult = Union[ComposeSuccess, ComposeFailure]


def _popen(cmd: list[str], cwd: str | None) -> subprocess.Popen[str]:
    return subprocess.Popen(
        cmd,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
    )


def execute(
    args: list[str],
    options: ComposeOptions,
    executable: str | None = None,
) -> ComposeResult:
    """Run docker-compose with args and map its exit code onto a result.

    Raises ComposeStartupError if the executable cannot be started.
    """
    cmd = [executable or resolve_executable(), *args]
    cwd = working_dir(options)
    sink = options.into if options.into is not None else io.StringIO()
    logger.debug("Running: %s (cwd=%s)", shlex.join(cmd), cwd or ".")

    try:
        proc = _popen(cmd, str(cwd) if cwd is not None else None)
    except OSError as exc:
        raise ComposeStartupError(
            f"Cannot start docker-compose executable {cmd[0]!r}: {exc}"
        ) from exc

    with proc:
        for line in cast(IO[str], proc.stdout):
            sink.write(line)
        exit_code = proc.wait()

    output = sink if options.into is not None else sink.getvalue()
    if exit_code == 0:
        return ComposeSuccess(output)

    logger.info("docker-compose %s exited with code %d", " ".join(args), exit_code)
    return ComposeFailure(exit_code, output)
