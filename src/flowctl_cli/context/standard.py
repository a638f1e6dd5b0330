"""Immutable execution context passed to every flowctl command.

The context is assembled with :class:`ExecutionContextBuilder` and validated
once in :meth:`ExecutionContextBuilder.build`. A built context always carries
both client factories, a session, an output sink and a writer for every
:class:`ResultType`, so commands never need to check for missing pieces.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, TextIO

from .exceptions import MissingContextFieldError, MissingResultWriterError
from .types import ClientFactory, ResultType, ResultWriter, Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Validated bundle of everything a command needs to run."""

    flow_client_factory: ClientFactory[Any]
    registry_client_factory: ClientFactory[Any]
    session: Session
    output: TextIO
    interactive: bool
    result_writers: Mapping[ResultType, ResultWriter]

    Builder: ClassVar[type["ExecutionContextBuilder"]]

    @classmethod
    def builder(cls) -> "ExecutionContextBuilder":
        return ExecutionContextBuilder()

    def is_interactive(self) -> bool:
        return self.interactive

    def resolve_result_writer(self, result_type: ResultType | None = None) -> ResultWriter:
        """Return the writer for ``result_type``, or the default when omitted.

        Without an explicit type, interactive sessions get the SIMPLE writer
        and batch or scripted runs get the JSON writer.
        """
        if result_type is None:
            if self.interactive:
                return self.result_writers[ResultType.SIMPLE]
            return self.result_writers[ResultType.JSON]
        return self.result_writers[result_type]


class ExecutionContextBuilder:
    """Fluent accumulator for :class:`ExecutionContext`.

    Setters do no validation and may be called in any order; the last value
    wins. All checks happen in :meth:`build`, which can be called repeatedly
    to produce independent snapshots.
    """

    def __init__(self) -> None:
        self._flow_client_factory: ClientFactory[Any] | None = None
        self._registry_client_factory: ClientFactory[Any] | None = None
        self._session: Session | None = None
        self._output: TextIO | None = None
        self._interactive = False
        self._result_writers: dict[ResultType, ResultWriter] = {}

    def set_flow_client_factory(self, factory: ClientFactory[Any]) -> "ExecutionContextBuilder":
        self._flow_client_factory = factory
        return self

    def set_registry_client_factory(self, factory: ClientFactory[Any]) -> "ExecutionContextBuilder":
        self._registry_client_factory = factory
        return self

    def set_session(self, session: Session) -> "ExecutionContextBuilder":
        self._session = session
        return self

    def set_output(self, output: TextIO) -> "ExecutionContextBuilder":
        self._output = output
        return self

    def set_interactive(self, interactive: bool) -> "ExecutionContextBuilder":
        self._interactive = interactive
        return self

    def add_result_writer(self, result_type: ResultType, writer: ResultWriter) -> "ExecutionContextBuilder":
        self._result_writers[result_type] = writer
        return self

    def build(self) -> ExecutionContext:
        """Validate the accumulated configuration and freeze it.

        Raises:
            MissingContextFieldError: A client factory, the session or the
                output sink was never set. Fields are checked in that order.
            MissingResultWriterError: Some ``ResultType`` has no writer.
        """
        result_writers = MappingProxyType(dict(self._result_writers or {}))

        required = (
            ("flow_client_factory", self._flow_client_factory),
            ("registry_client_factory", self._registry_client_factory),
            ("session", self._session),
            ("output", self._output),
            ("result_writers", result_writers),
        )
        for field_name, value in required:
            if value is None:
                logger.debug("ExecutionContext build rejected: %s is not set", field_name)
                raise MissingContextFieldError(field_name)

        # Iterate the enum, not the mapping: extra keys are tolerated.
        for result_type in ResultType:
            if result_type not in result_writers:
                logger.debug("ExecutionContext build rejected: no writer for %s", result_type.name)
                raise MissingResultWriterError(result_type)

        logger.debug(
            "Built ExecutionContext (interactive=%s, writers=%s)",
            self._interactive,
            ", ".join(sorted(str(key) for key in result_writers)),
        )
        return ExecutionContext(
            flow_client_factory=self._flow_client_factory,
            registry_client_factory=self._registry_client_factory,
            session=self._session,
            output=self._output,
            interactive=self._interactive,
            result_writers=result_writers,
        )


ExecutionContext.Builder = ExecutionContextBuilder
