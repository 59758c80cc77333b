"""Default options loaded from configs/compose.toml and environment variables."""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from .executable import EXECUTABLE_ENV_VAR

logger = logging.getLogger("dockercompose.config")

CONFIG_FILE = Path("configs") / "compose.toml"


def load_compose_config(repo_path: Path) -> dict:
    """Load defaults from configs/compose.toml and env vars. Safe defaults if missing."""
    config: dict = {
        "executable": None,
        "project_name": None,
        "compose_path": None,
        "always_yes": False,
    }

    config_path = repo_path / CONFIG_FILE
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text())
            if "compose" in data:
                cfg = data["compose"]
                config["executable"] = cfg.get("executable")
                config["project_name"] = cfg.get("project_name")
                if cfg.get("compose_path"):
                    config["compose_path"] = str(repo_path / cfg["compose_path"])
                config["always_yes"] = bool(cfg.get("always_yes", False))
        except (tomllib.TOMLDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable %s: %s", config_path, exc)

    # Env overrides
    if os.getenv(EXECUTABLE_ENV_VAR):
        config["executable"] = os.environ[EXECUTABLE_ENV_VAR]
    if os.getenv("DOCKER_COMPOSE_PROJECT_NAME"):
        config["project_name"] = os.environ["DOCKER_COMPOSE_PROJECT_NAME"]
    if os.getenv("DOCKER_COMPOSE_FILE"):
        config["compose_path"] = os.environ["DOCKER_COMPOSE_FILE"]
    if os.getenv("DOCKER_COMPOSE_ALWAYS_YES", "").lower() in ("1", "true", "yes"):
        config["always_yes"] = True

    return config
