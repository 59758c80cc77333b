"""docker-compose executable resolution.

Windows hosts use docker-compose.exe from PATH. Other hosts prefer the binary
bundled under dockercompose/bin, then whatever docker-compose is on PATH.
Tests and embedding code can pin a path with set_executable().
"""
from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger("dockercompose.executable")

EXECUTABLE_ENV_VAR = "DOCKER_COMPOSE_EXECUTABLE"
WINDOWS_EXECUTABLE = "docker-compose.exe"
POSIX_EXECUTABLE = "docker-compose"
BUNDLED_EXECUTABLE = Path(__file__).parent / "bin" / POSIX_EXECUTABLE

_override: str | None = None


def set_executable(path: str | os.PathLike[str] | None) -> None:
    """Pin the executable used by every call, or clear the pin with None."""
    global _override
    _override = os.fspath(path) if path is not None else None
    if _override:
        logger.debug("docker-compose executable pinned to %s", _override)


def resolve_executable() -> str:
    if _override:
        return _override

    from_env = os.getenv(EXECUTABLE_ENV_VAR)
    if from_env:
        return from_env

    if os.name == "nt":
        return shutil.which(WINDOWS_EXECUTABLE) or WINDOWS_EXECUTABLE

    if BUNDLED_EXECUTABLE.exists():
        return str(BUNDLED_EXECUTABLE)

    found = shutil.which(POSIX_EXECUTABLE)
    if found:
        logger.debug("Using docker-compose from PATH: %s", found)
        return found
    # Left for the caller to fail on, so the startup error is reported.
    return str(BUNDLED_EXECUTABLE)
