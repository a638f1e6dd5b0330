"""flowctl configuration management"""
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

DEFAULT_FLOW_URL = "http://localhost:8080"
DEFAULT_REGISTRY_URL = "http://localhost:18080"
SERVICES = ("flow", "registry")


class CliConfig:
    """Manage ~/.flowctl/config.toml"""

    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or Path.home() / ".flowctl"
        self.config_file = self.config_dir / "config.toml"

    def _load(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return {}
        return toml.load(self.config_file)

    def _get(self, section: str, key: str) -> str | None:
        value = self._load().get(section)
        if isinstance(value, dict):
            item = value.get(key)
            if isinstance(item, str) and item.strip():
                return item.strip()
        return None

    def get_flow_url(self) -> str:
        """Get flow service URL from config"""
        return self._get("flow", "url") or DEFAULT_FLOW_URL

    def get_registry_url(self) -> str:
        """Get registry service URL from config"""
        return self._get("registry", "url") or DEFAULT_REGISTRY_URL

    def get_session_path(self) -> Path:
        """Get the session file location"""
        configured = self._get("session", "path")
        if configured:
            return Path(configured).expanduser()
        return self.config_dir / "session.toml"

    def set_url(self, service: str, url: str) -> None:
        """Set a service URL in config"""
        if service not in SERVICES:
            raise ValueError(f"Unknown service '{service}'. Expected one of: {', '.join(SERVICES)}")

        self.config_dir.mkdir(parents=True, exist_ok=True)
        config = self._load()

        section = config.get(service)
        if not isinstance(section, dict):
            section = {}
            config[service] = section

        section["url"] = url

        with open(self.config_file, "w", encoding="utf-8") as f:
            toml.dump(config, f)

    def set_flow_url(self, url: str) -> None:
        self.set_url("flow", url)

    def set_registry_url(self, url: str) -> None:
        self.set_url("registry", url)
