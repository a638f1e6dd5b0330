"""CLI helpers exposed for other modules."""

from .bootstrap import build_execution_context, detect_interactive
from .state import CliState, emit, get_state, run_or_exit

__all__ = [
    "CliState",
    "build_execution_context",
    "detect_interactive",
    "emit",
    "get_state",
    "run_or_exit",
]
