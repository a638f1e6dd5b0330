from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from flowctl_cli.config import CliConfig
from flowctl_cli.context import ExecutionContext, ExecutionContextBuilder, ResultType
from flowctl_cli.session import InMemorySession


@pytest.fixture()
def flow_factory() -> MagicMock:
    return MagicMock(name="flow_client_factory")


@pytest.fixture()
def registry_factory() -> MagicMock:
    return MagicMock(name="registry_client_factory")


@pytest.fixture()
def writers() -> dict[ResultType, MagicMock]:
    return {result_type: MagicMock(name=f"{result_type.name}_writer") for result_type in ResultType}


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def complete_builder(flow_factory, registry_factory, writers, output) -> ExecutionContextBuilder:
    """Builder with every required field and a writer per result type."""
    builder = (
        ExecutionContext.builder()
        .set_flow_client_factory(flow_factory)
        .set_registry_client_factory(registry_factory)
        .set_session(InMemorySession())
        .set_output(output)
    )
    for result_type, writer in writers.items():
        builder.add_result_writer(result_type, writer)
    return builder


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / ".flowctl"
    path.mkdir()
    return path


@pytest.fixture()
def cli_config(config_dir: Path) -> CliConfig:
    return CliConfig(config_dir)
