"""dockercompose CLI entry point.

Usage:
    dockercompose up web db --force-recreate
    dockercompose -f deploy/docker-compose.yml -p demo down --remove-orphans
    dockercompose restart worker
    dockercompose --version

Defaults come from configs/compose.toml in the current directory and the
DOCKER_COMPOSE_* environment variables; command-line flags win.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .command import Operation
from .compose import run
from .config import load_compose_config
from .executable import set_executable
from .runner import ComposeStartupError

logger = logging.getLogger("dockercompose.cli")

# Shell convention for "command not found".
STARTUP_FAILURE_EXIT_CODE = 127


class _EchoSink:
    """Streams docker-compose output straight to the terminal."""

    def write(self, text: str) -> None:
        click.echo(text, nl=False)


def _invoke(ctx: click.Context, operation: Operation, **opts) -> None:
    settings = ctx.obj
    if settings["compose_path"]:
        opts["compose_path"] = settings["compose_path"]
    if settings["project_name"]:
        opts["project_name"] = settings["project_name"]
    if settings["always_yes"]:
        opts["always_yes"] = True
    try:
        result = run(operation, into=_EchoSink(), **opts)
    except ComposeStartupError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(STARTUP_FAILURE_EXIT_CODE)
    if not result.ok:
        logger.debug("docker-compose %s failed with exit code %d", operation.value, result.exit_code)
    ctx.exit(result.exit_code)


@click.group()
@click.version_option(__version__, prog_name="dockercompose")
@click.option("-f", "--file", "compose_path", default=None, type=click.Path(dir_okay=False), help="Compose file (default: docker-compose.yml in cwd)")
@click.option("-p", "--project-name", default=None, help="Compose project name")
@click.option("-y", "--always-yes", is_flag=True, default=False, help="Answer yes to all interactive questions")
@click.option("--executable", default=None, type=click.Path(dir_okay=False), help="docker-compose executable to use")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def main(ctx, compose_path, project_name, always_yes, executable, verbose):
    """Thin wrapper around the docker-compose executable."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    config = load_compose_config(Path.cwd())
    executable = executable or config["executable"]
    if executable:
        set_executable(executable)
    ctx.obj = {
        "compose_path": compose_path or config["compose_path"],
        "project_name": project_name or config["project_name"],
        "always_yes": always_yes or config["always_yes"],
    }


@main.command()
@click.argument("services", nargs=-1)
@click.option("--force-recreate", is_flag=True, default=False, help="Recreate containers even if unchanged")
@click.option("--remove-orphans", is_flag=True, default=False, help="Remove containers not defined in the compose file")
@click.pass_context
def up(ctx, services, force_recreate, remove_orphans):
    """Create and start services in detached mode."""
    _invoke(
        ctx,
        Operation.UP,
        service=list(services),
        force_recreate=force_recreate,
        remove_orphans=remove_orphans,
    )


@main.command()
@click.option("--remove-orphans", is_flag=True, default=False, help="Remove containers not defined in the compose file")
@click.pass_context
def down(ctx, remove_orphans):
    """Stop and remove containers and networks."""
    _invoke(ctx, Operation.DOWN, remove_orphans=remove_orphans)


@main.command()
@click.argument("services", nargs=-1)
@click.pass_context
def restart(ctx, services):
    """Restart services."""
    _invoke(ctx, Operation.RESTART, service=list(services))


@main.command()
@click.argument("services", nargs=-1)
@click.pass_context
def stop(ctx, services):
    """Stop running services without removing them."""
    _invoke(ctx, Operation.STOP, service=list(services))


@main.command()
@click.argument("services", nargs=-1)
@click.pass_context
def start(ctx, services):
    """Start previously created services."""
    _invoke(ctx, Operation.START, service=list(services))
