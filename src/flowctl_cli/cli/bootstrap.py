"""Standard wiring of the execution context for a flowctl process."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from flowctl_cli.clients import FlowClientFactory, RegistryClientFactory
from flowctl_cli.config import CliConfig
from flowctl_cli.context import ExecutionContext
from flowctl_cli.output import default_result_writers
from flowctl_cli.session import PersistentSession

logger = logging.getLogger(__name__)


def detect_interactive(output: TextIO) -> bool:
    isatty = getattr(output, "isatty", None)
    return bool(isatty and isatty())


def build_execution_context(
    config: CliConfig,
    *,
    output: TextIO | None = None,
    interactive: bool | None = None,
) -> ExecutionContext:
    """Build the context shared by every command in this process.

    Raises:
        ContextConfigurationError: The assembled configuration is incomplete.
    """
    output = output if output is not None else sys.stdout
    if interactive is None:
        interactive = detect_interactive(output)

    builder = (
        ExecutionContext.builder()
        .set_flow_client_factory(FlowClientFactory(config.get_flow_url()))
        .set_registry_client_factory(RegistryClientFactory(config.get_registry_url()))
        .set_session(PersistentSession(config.get_session_path()))
        .set_output(output)
        .set_interactive(interactive)
    )
    for result_type, writer in default_result_writers().items():
        builder.add_result_writer(result_type, writer)

    logger.debug("Bootstrapping flowctl context from %s", config.config_file)
    return builder.build()
