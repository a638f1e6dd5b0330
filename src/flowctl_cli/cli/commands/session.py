"""Session commands for saved client properties."""

from __future__ import annotations

from pathlib import Path

import typer

from flowctl_cli.cli.state import emit, get_state, run_or_exit

app = typer.Typer(help="Manage session variables")


@app.command("keys")
def keys_command(ctx: typer.Context) -> None:
    """List the session variables that are currently set."""

    def _run() -> None:
        emit(ctx, {"variables": get_state(ctx).context.session.variable_names()})

    run_or_exit(_run)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show every session variable and its value."""

    def _run() -> None:
        emit(ctx, get_state(ctx).context.session.items())

    run_or_exit(_run)


@app.command("get")
def get_command(ctx: typer.Context, name: str = typer.Argument(..., help="Session variable name")) -> None:
    """Print the value of one session variable."""

    def _run() -> None:
        value = get_state(ctx).context.session.get(name)
        if value is None:
            raise ValueError(f"Session variable '{name}' is not set")
        emit(ctx, {name: value})

    run_or_exit(_run)


@app.command("set")
def set_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Session variable name (flow.props, registry.props)"),
    value: str = typer.Argument(..., help="Path to a client properties file"),
) -> None:
    """Set a session variable."""

    def _run() -> None:
        # Stored absolute so later commands can run from any directory.
        path = str(Path(value).expanduser().resolve())
        get_state(ctx).context.session.set(name, path)
        emit(ctx, {name: path})

    run_or_exit(_run)


@app.command("remove")
def remove_command(ctx: typer.Context, name: str = typer.Argument(..., help="Session variable name")) -> None:
    """Remove a session variable."""

    def _run() -> None:
        get_state(ctx).context.session.remove(name)
        emit(ctx, {"removed": name})

    run_or_exit(_run)


@app.command("clear")
def clear_command(ctx: typer.Context) -> None:
    """Remove all session variables."""

    def _run() -> None:
        get_state(ctx).context.session.clear()
        emit(ctx, {"cleared": True})

    run_or_exit(_run)
