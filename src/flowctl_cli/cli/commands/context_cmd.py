"""Commands that describe the active execution context."""

from __future__ import annotations

import typer

from flowctl_cli.cli.state import emit, get_state, run_or_exit
from flowctl_cli.clients import resolve_client_properties
from flowctl_cli.context import ResultType, SessionVariable

app = typer.Typer(help="Inspect the execution context")


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show interactivity, output defaults and the configured service clients."""

    def _run() -> None:
        state = get_state(ctx)
        context = state.context
        config = state.config

        flow_properties = resolve_client_properties(
            context.session, SessionVariable.FLOW_CLIENT_PROPS, config.get_flow_url()
        )
        registry_properties = resolve_client_properties(
            context.session, SessionVariable.REGISTRY_CLIENT_PROPS, config.get_registry_url()
        )

        with context.flow_client_factory.create_client(flow_properties) as flow_client:
            flow_url = flow_client.base_url
        with context.registry_client_factory.create_client(registry_properties) as registry_client:
            registry_url = registry_client.base_url

        default_type = ResultType.SIMPLE if context.is_interactive() else ResultType.JSON
        emit(
            ctx,
            {
                "interactive": context.is_interactive(),
                "output_type": str(state.output_type or default_type),
                "flow_url": flow_url,
                "registry_url": registry_url,
                "session": context.session.items(),
            },
        )

    run_or_exit(_run)
