"""Result writers for the simple and JSON output types."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TextIO

from pydantic import BaseModel
from rich.console import Console

from flowctl_cli.context.types import ResultType, ResultWriter


def _plain(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True)
    return result


class SimpleResultWriter:
    """Human-readable output: ``key: value`` lines for mappings."""

    def write(self, result: Any, output: TextIO) -> None:
        console = Console(file=output, highlight=False, emoji=False, soft_wrap=True)
        result = _plain(result)

        if isinstance(result, Mapping):
            if not result:
                console.print("(none)", markup=False)
            for key, value in result.items():
                console.print(f"{key}: {self._format_value(value)}", markup=False)
            return

        if isinstance(result, (list, tuple, set)):
            for item in result:
                console.print(str(item), markup=False)
            return

        console.print("" if result is None else str(result), markup=False)

    @staticmethod
    def _format_value(value: Any) -> str:
        if value is None:
            return "-"
        if isinstance(value, bool):
            return "yes" if value else "no"
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value) or "-"
        if isinstance(value, Mapping):
            return ", ".join(f"{key}={item}" for key, item in value.items()) or "-"
        return str(value)


class JsonResultWriter:
    """Structured output for scripts and pipes."""

    def write(self, result: Any, output: TextIO) -> None:
        output.write(json.dumps(_plain(result), indent=2, sort_keys=True, default=str))
        output.write("\n")


def default_result_writers() -> dict[ResultType, ResultWriter]:
    """Return a fresh writer mapping covering every result type."""
    return {
        ResultType.SIMPLE: SimpleResultWriter(),
        ResultType.JSON: JsonResultWriter(),
    }
