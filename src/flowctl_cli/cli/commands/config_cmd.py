"""Configuration commands for service URLs."""

from __future__ import annotations

import typer

from flowctl_cli.cli.state import emit, get_state, run_or_exit

app = typer.Typer(help="Manage flowctl configuration")


@app.command("set-url")
def set_url_command(
    ctx: typer.Context,
    service: str = typer.Argument(..., help="Service name: flow | registry"),
    url: str = typer.Argument(..., help="Base URL of the service"),
) -> None:
    """Set the default base URL for a service."""

    def _run() -> None:
        get_state(ctx).config.set_url(service.strip().lower(), url.strip())
        emit(ctx, {"service": service, "url": url})

    run_or_exit(_run)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show the configured service URLs and session location."""

    def _run() -> None:
        config = get_state(ctx).config
        emit(
            ctx,
            {
                "config_file": str(config.config_file),
                "flow_url": config.get_flow_url(),
                "registry_url": config.get_registry_url(),
                "session_file": str(config.get_session_path()),
            },
        )

    run_or_exit(_run)
