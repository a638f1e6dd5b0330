"""Per-process CLI state stored on the root typer context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import typer

from flowctl_cli.config import CliConfig
from flowctl_cli.context import ExecutionContext, ResultType

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CliState:
    """Object stored on :class:`typer.Context` for command access."""

    context: ExecutionContext
    config: CliConfig
    output_type: ResultType | None = None


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    if state is None:
        typer.secho("flowctl context was not initialised", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    return state


def emit(ctx: typer.Context, result: Any) -> None:
    """Render ``result`` with the writer matching the requested output type."""
    state = get_state(ctx)
    writer = state.context.resolve_result_writer(state.output_type)
    writer.write(result, state.context.output)


def run_or_exit(fn: Callable[[], T]) -> T:
    try:
        return fn()
    except typer.Exit:
        raise
    except (RuntimeError, ValueError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
