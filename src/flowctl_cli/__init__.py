"""
flowctl - command-line tool for the flow and registry services.

Usage:
    flowctl context show
    flowctl session set flow.props ~/flow.toml
    flowctl -o json config show
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from flowctl_cli.cli.bootstrap import build_execution_context
from flowctl_cli.cli.commands import register_commands
from flowctl_cli.cli.state import CliState
from flowctl_cli.config import CliConfig
from flowctl_cli.context import ContextConfigurationError, ResultType

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="flowctl",
    help="Manage flow and registry services from the command line",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback(
    ctx: typer.Context,
    output_type: Optional[ResultType] = typer.Option(
        None, "--output-type", "-o", help="Result format (default: simple when interactive, json otherwise)"
    ),
    interactive: Optional[bool] = typer.Option(
        None, "--interactive/--batch", help="Override terminal detection for the default output type"
    ),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help="Configuration directory (default: ~/.flowctl)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Build the execution context shared by every command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(asctime)s] %(levelname)s: %(message)s")

    config = CliConfig(config_dir)
    try:
        context = build_execution_context(config, interactive=interactive)
    except (ContextConfigurationError, ValueError) as exc:
        logger.debug("Cannot start flowctl: %s", exc)
        typer.secho(f"Invalid flowctl configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    ctx.obj = CliState(context=context, config=config, output_type=output_type)


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
