"""Exception hierarchy for execution context construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import ResultType


class ContextConfigurationError(RuntimeError):
    """Base exception for an execution context that cannot be built."""
    pass


class MissingContextFieldError(ContextConfigurationError):
    """A required context field was never set on the builder."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"ExecutionContext requires '{field_name}' to be set")


class MissingResultWriterError(ContextConfigurationError):
    """No writer was registered for a result type."""

    def __init__(self, result_type: "ResultType"):
        self.result_type = result_type
        super().__init__(f"ResultWriter not found for {result_type.name}")
