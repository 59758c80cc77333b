"""Invocation options for docker-compose calls.

Options arrive as keyword arguments and are normalised into a ComposeOptions
record. Unknown keys are ignored with a warning so typos do not go unnoticed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

logger = logging.getLogger("dockercompose.options")

KNOWN_OPTIONS = (
    "always_yes",
    "compose_path",
    "project_name",
    "force_recreate",
    "remove_orphans",
    "service",
    "services",
    "into",
)


class OutputSink(Protocol):
    """Anything docker-compose output can be written into."""

    def write(self, text: str, /) -> Any: ...


@dataclass
class ComposeOptions:
    always_yes: bool = False
    compose_path: str | Path | None = None
    project_name: str | None = None
    force_recreate: bool = False
    remove_orphans: bool = False
    services: list[str] = field(default_factory=list)
    into: OutputSink | None = None
    # Order in which -f / -p were supplied; emitted in this order.
    compose_flag_order: tuple[str, ...] = ("compose_path", "project_name")

    def __post_init__(self) -> None:
        self.services = _service_names(self.services)

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> ComposeOptions:
        return cls.from_mapping(kwargs)

    @classmethod
    def from_mapping(cls, opts: Mapping[str, Any]) -> ComposeOptions:
        """Build options from a mapping, preserving the caller's key order."""
        options = cls()
        flag_order: list[str] = []
        for key, value in opts.items():
            if key not in KNOWN_OPTIONS:
                logger.warning("Ignoring unknown docker-compose option: %s", key)
                continue
            if key in ("service", "services"):
                options.services.extend(_service_names(value))
                continue
            setattr(options, key, value)
            if key in ("compose_path", "project_name") and key not in flag_order:
                flag_order.append(key)
        for key in ("compose_path", "project_name"):
            if key not in flag_order:
                flag_order.append(key)
        options.compose_flag_order = tuple(flag_order)
        return options


def _service_names(value: str | Iterable[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(name) for name in value]
