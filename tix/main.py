"""CLI entry point for tix."""

import asyncio
import sys
from pathlib import Path

import click
import structlog

from tix import __version__
from tix.cli.prompts import ClickPrompter
from tix.config.credentials import HostCredentials
from tix.config.settings import DEFAULT_CONFIG_PATH, TixSettings
from tix.engine.orchestrator import CreateWorkflow
from tix.exceptions import ConfigurationError, TixError
from tix.utils.logging_config import configure_logging, level_for_verbosity

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--config",
    default=DEFAULT_CONFIG_PATH,
    envvar="TIX_CONFIG",
    show_default=True,
    help="Path to configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (overrides -v)",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, prog_name="tix")
@click.pass_context
def cli(ctx: click.Context, config: str, log_level: str | None, verbose: int) -> None:
    """tix: create an issue and a branch for it in one step."""
    configure_logging(level_for_verbosity(verbose, log_level))

    try:
        settings = TixSettings.from_yaml(config)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug("config_error", exc_info=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error loading configuration: {e}", err=True)
        log.error("config_error_unexpected", exc_info=True)
        sys.exit(1)

    log.debug("config_loaded", path=str(Path(config).expanduser()), repositories=len(settings.repositories))
    ctx.obj = {"settings": settings}


@cli.command()
@click.option("--title", "-t", default=None, help="Issue title (prompted for when omitted or empty)")
@click.pass_context
def create(ctx: click.Context, title: str | None) -> None:
    """Create an issue and a branch (or worktree) for it."""
    try:
        settings = ctx.obj["settings"]
        workflow = CreateWorkflow(settings, HostCredentials(), ClickPrompter())
        asyncio.run(workflow.run(title))
    except TixError as e:
        click.echo(f"Error: {e}", err=True)
        log.debug("create_error", exc_info=True)
        sys.exit(1)
    except (KeyboardInterrupt, click.Abort):
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        log.error("create_unexpected", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
