"""Execution context threaded through every flowctl command."""

from flowctl_cli.context.exceptions import (
    ContextConfigurationError,
    MissingContextFieldError,
    MissingResultWriterError,
)
from flowctl_cli.context.standard import ExecutionContext, ExecutionContextBuilder
from flowctl_cli.context.types import (
    ClientFactory,
    ResultType,
    ResultWriter,
    Session,
    SessionVariable,
)

__all__ = [
    "ClientFactory",
    "ContextConfigurationError",
    "ExecutionContext",
    "ExecutionContextBuilder",
    "MissingContextFieldError",
    "MissingResultWriterError",
    "ResultType",
    "ResultWriter",
    "Session",
    "SessionVariable",
]
