"""Session variable storage for flowctl.

Sessions hold paths to client properties files so that repeated commands
can reuse a saved flow or registry connection.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]
from filelock import FileLock, Timeout

from flowctl_cli.context.types import SessionVariable

logger = logging.getLogger(__name__)

LOCK_TIMEOUT_SECONDS = 10


class SessionError(RuntimeError):
    """Raised when a session variable is invalid or cannot be persisted."""


def _require_variable(name: str) -> str:
    try:
        return SessionVariable(name.strip()).value
    except ValueError as exc:
        known = ", ".join(variable.value for variable in SessionVariable)
        raise SessionError(f"Unknown session variable '{name}'. Known variables: {known}") from exc


class InMemorySession:
    """Session whose variables live only for the current process."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    def get(self, name: str) -> str | None:
        return self._values.get(_require_variable(name))

    def set(self, name: str, value: str) -> None:
        key = _require_variable(name)
        if value is None or not str(value).strip():
            raise SessionError(f"Session variable '{key}' requires a non-empty value")
        self._values[key] = str(value).strip()

    def remove(self, name: str) -> None:
        self._values.pop(_require_variable(name), None)

    def clear(self) -> None:
        self._values.clear()

    def variable_names(self) -> list[str]:
        return sorted(self._values)

    def items(self) -> dict[str, str]:
        return dict(sorted(self._values.items()))


class PersistentSession(InMemorySession):
    """Session persisted to a TOML file after every change."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.lock_path = path.with_suffix(".lock")
        self._loaded = False

    def _acquire_lock(self) -> FileLock:
        return FileLock(self.lock_path, timeout=LOCK_TIMEOUT_SECONDS)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._values = self._read()
        self._loaded = True

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with self._acquire_lock():
                payload: dict[str, Any] = toml.load(self.path)
        except (toml.TomlDecodeError, OSError, Timeout) as exc:
            raise SessionError(f"Failed to load session from {self.path}: {exc}") from exc

        variables = payload.get("variables")
        if not isinstance(variables, dict):
            return {}

        logger.debug("Loaded %d session variable(s) from %s", len(variables), self.path)
        known = {variable.value for variable in SessionVariable}
        return {
            str(key): str(value)
            for key, value in variables.items()
            if str(key) in known and str(value).strip()
        }

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self._acquire_lock():
                with open(self.path, "w", encoding="utf-8") as handle:
                    toml.dump({"variables": dict(self._values)}, handle)
                if os.name != "nt":
                    os.chmod(self.path, 0o600)
        except (OSError, Timeout) as exc:
            raise SessionError(f"Failed to save session to {self.path}: {exc}") from exc
        logger.debug("Saved %d session variable(s) to %s", len(self._values), self.path)

    def get(self, name: str) -> str | None:
        self._ensure_loaded()
        return super().get(name)

    def set(self, name: str, value: str) -> None:
        self._ensure_loaded()
        super().set(name, value)
        self._write()

    def remove(self, name: str) -> None:
        self._ensure_loaded()
        super().remove(name)
        self._write()

    def clear(self) -> None:
        self._loaded = True
        super().clear()
        self._write()

    def variable_names(self) -> list[str]:
        self._ensure_loaded()
        return super().variable_names()

    def items(self) -> dict[str, str]:
        self._ensure_loaded()
        return super().items()
