"""CLI command modules for flowctl."""

from __future__ import annotations

import typer

from . import config_cmd, context_cmd, session


def register_commands(app: typer.Typer) -> None:
    """Attach every command group to the root app."""
    app.add_typer(context_cmd.app, name="context")
    app.add_typer(session.app, name="session")
    app.add_typer(config_cmd.app, name="config")


__all__ = ["register_commands"]
