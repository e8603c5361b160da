"""CLI command implementations for Tessa path diagnostics."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console

from tessa.cli.cli_name import replace_cli_name, resolve_cli_name
from tessa.config import (
    load_config,
    resolve_config_path,
    resolve_config_path_candidate,
    resolve_default_config_candidates,
    resolve_gateway_lock_dir,
    resolve_gateway_port,
    resolve_is_nix_mode,
    resolve_legacy_state_dirs,
    resolve_oauth_dir,
    resolve_oauth_path,
    resolve_state_dir,
)
from tessa.config.models import TessaConfig
from tessa.constants import VERSION
from tessa.exceptions import ConfigError
from tessa.output import ConsoleOutputHandler, OutputHandler
from tessa.output.console import build_candidates_table, build_locations_table

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Tessa paths v{VERSION}")
        raise typer.Exit()


def main(
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Log which override or candidate won each lookup"
        ),
) -> None:
    """Inspect where Tessa keeps its state, config and credentials."""

    # Configure logging level based on verbose flag
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def _load_config_or_warn(output: OutputHandler, config_path: Path) -> TessaConfig | None:
    """Load the config for the port lookup; a broken file only costs the config port."""
    try:
        return load_config(config_path)
    except ConfigError as e:
        output.warning(f"{e}; ignoring gateway settings from config")
        return None


def collect_locations(output: OutputHandler) -> dict[str, object]:
    """Resolve every location against the live environment."""
    state_dir = resolve_state_dir()
    config_path = resolve_config_path(state_dir=state_dir)
    cfg = _load_config_or_warn(output, config_path)
    return {
        "cli_name": resolve_cli_name(),
        "state_dir": str(state_dir),
        "config_path": str(config_path),
        "oauth_dir": str(resolve_oauth_dir(state_dir=state_dir)),
        "oauth_path": str(resolve_oauth_path(state_dir=state_dir)),
        "gateway_lock_dir": str(resolve_gateway_lock_dir()),
        "gateway_port": resolve_gateway_port(cfg),
        "nix_mode": resolve_is_nix_mode(),
    }


def show(
        as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON"),
) -> None:
    """Show the resolved locations."""
    # Keep stdout clean for JSON consumers
    output = ConsoleOutputHandler(Console(stderr=as_json))
    locations = collect_locations(output)

    if as_json:
        typer.echo(json.dumps(locations, indent=2))
        return
    output.print(build_locations_table({key: str(value) for key, value in locations.items()}))


def candidates() -> None:
    """List config file candidates in probe order."""
    output = ConsoleOutputHandler()
    output.print(build_candidates_table("Config candidates", resolve_default_config_candidates()))
    output.info(f"Active config: {resolve_config_path_candidate()}")


def legacy_dirs() -> None:
    """List legacy state directories that may need migrating."""
    output = ConsoleOutputHandler()
    output.print(build_candidates_table("Legacy state directories", resolve_legacy_state_dirs()))


def rewrite(
        command: str = typer.Argument(..., help="Command to rewrite, e.g. 'npx clawdbot start'"),
        cli_name: str | None = typer.Option(
            None, "--cli-name",
            help="Name to substitute (default: the name this CLI was invoked as)",
        ),
) -> None:
    """Rewrite the leading CLI name of a command."""
    typer.echo(replace_cli_name(command, cli_name))
