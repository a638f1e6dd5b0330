"""Backend client factories for flowctl."""

from flowctl_cli.clients.factory import (
    ClientConfigurationError,
    ClientProperties,
    FlowClient,
    FlowClientFactory,
    RegistryClient,
    RegistryClientFactory,
    ServiceClient,
    load_client_properties,
    parse_client_properties,
    resolve_client_properties,
)

__all__ = [
    "ClientConfigurationError",
    "ClientProperties",
    "FlowClient",
    "FlowClientFactory",
    "RegistryClient",
    "RegistryClientFactory",
    "ServiceClient",
    "load_client_properties",
    "parse_client_properties",
    "resolve_client_properties",
]
