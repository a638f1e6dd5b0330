"""Client factories for the flow and registry services.

Factories turn client properties into configured ``httpx`` clients. Creating
a client never contacts the server; requests are issued by the commands that
use it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

import httpx
import toml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from flowctl_cli.context.types import Session, SessionVariable

logger = logging.getLogger(__name__)


class ClientConfigurationError(RuntimeError):
    """Raised when client properties are missing or invalid."""


class ClientProperties(BaseModel):
    """Connection settings for one backend service."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    base_url: str = Field(alias="baseUrl")
    connect_timeout: float = Field(default=10.0, gt=0, alias="connectTimeout")
    read_timeout: float = Field(default=30.0, gt=0, alias="readTimeout")
    verify_tls: bool = Field(default=True, alias="verifyTls")

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"baseUrl must start with http:// or https:// (got '{value}')")
        return value.rstrip("/")


def parse_client_properties(values: Mapping[str, Any]) -> ClientProperties:
    try:
        return ClientProperties.model_validate(dict(values))
    except ValidationError as exc:
        raise ClientConfigurationError(f"Invalid client properties: {exc}") from exc


def load_client_properties(path: Path) -> ClientProperties:
    """Read client properties from a TOML file."""
    if not path.exists():
        raise ClientConfigurationError(f"Client properties file not found: {path}")
    try:
        payload = toml.load(path)
    except (toml.TomlDecodeError, OSError) as exc:
        raise ClientConfigurationError(f"Failed to parse {path}: {exc}") from exc
    return parse_client_properties(payload)


def resolve_client_properties(
    session: Session,
    variable: SessionVariable,
    default_url: str,
) -> ClientProperties:
    """Use the properties file saved in the session, else the configured URL."""
    saved = session.get(variable.value)
    if saved:
        logger.debug("Using %s from session: %s", variable.value, saved)
        return load_client_properties(Path(saved).expanduser())
    return parse_client_properties({"baseUrl": default_url})


class ServiceClient:
    """Configured HTTP client for one backend service."""

    service: ClassVar[str] = "service"
    api_path: ClassVar[str] = ""

    def __init__(self, properties: ClientProperties) -> None:
        self.properties = properties
        self.http = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(properties.read_timeout, connect=properties.connect_timeout),
            verify=properties.verify_tls,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return f"{self.properties.base_url}{self.api_path}"

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"


class FlowClient(ServiceClient):
    service = "flow"
    api_path = "/flow-api"


class RegistryClient(ServiceClient):
    service = "registry"
    api_path = "/registry-api"


class _ServiceClientFactory:
    client_class: ClassVar[type[ServiceClient]] = ServiceClient

    def __init__(self, default_url: str) -> None:
        self.default_url = default_url

    def create_client(self, properties: ClientProperties | Mapping[str, Any] | None = None) -> Any:
        """Build a client from properties, a raw mapping, or the default URL."""
        if properties is None:
            properties = parse_client_properties({"baseUrl": self.default_url})
        elif not isinstance(properties, ClientProperties):
            properties = parse_client_properties(properties)

        client = self.client_class(properties)
        logger.debug("Created %s client for %s", client.service, client.base_url)
        return client


class FlowClientFactory(_ServiceClientFactory):
    """Creates :class:`FlowClient` instances."""

    client_class = FlowClient

    def create_client(self, properties: ClientProperties | Mapping[str, Any] | None = None) -> FlowClient:
        return super().create_client(properties)


class RegistryClientFactory(_ServiceClientFactory):
    """Creates :class:`RegistryClient` instances."""

    client_class = RegistryClient

    def create_client(self, properties: ClientProperties | Mapping[str, Any] | None = None) -> RegistryClient:
        return super().create_client(properties)
