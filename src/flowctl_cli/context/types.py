"""Collaborator contracts consumed by the execution context.

The context stores these objects and hands them to commands; it never
inspects their behaviour beyond the signatures below.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol, TextIO, TypeVar, runtime_checkable

ClientT = TypeVar("ClientT", covariant=True)


class ResultType(StrEnum):
    """Every shape a command result can be rendered in.

    - SIMPLE: human-readable text, the interactive default
    - JSON: structured output, the batch/scripted default
    """

    SIMPLE = "simple"
    JSON = "json"


class SessionVariable(StrEnum):
    """Variables a session may hold; values are client properties file paths."""

    FLOW_CLIENT_PROPS = "flow.props"
    REGISTRY_CLIENT_PROPS = "registry.props"


@runtime_checkable
class ClientFactory(Protocol[ClientT]):
    """Produces a configured client for one backend service."""

    def create_client(self, properties: Any = None) -> ClientT: ...


@runtime_checkable
class Session(Protocol):
    """Cross-invocation state such as saved client properties."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...

    def remove(self, name: str) -> None: ...

    def clear(self) -> None: ...

    def variable_names(self) -> list[str]: ...

    def items(self) -> Mapping[str, str]: ...


@runtime_checkable
class ResultWriter(Protocol):
    """Renders a command result to the output sink in one format."""

    def write(self, result: Any, output: TextIO) -> None: ...


__all__ = [
    "ClientFactory",
    "ResultType",
    "ResultWriter",
    "Session",
    "SessionVariable",
]
