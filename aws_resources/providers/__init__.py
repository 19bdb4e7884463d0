"""Resource service registry.

Front ends look services up by resource name, so the command line and the
console build their services the same way.
"""

from __future__ import annotations

from typing import Any

from aws_resources.core.interfaces import ResourceService
from aws_resources.providers.aws import BucketService, InstanceService
from aws_resources.providers.exceptions import (
    ProviderAPIError,
    ProviderConfigurationError,
    ProviderCredentialsError,
    ProviderError,
)

_SERVICES: dict[str, type] = {}


def register_service(name: str, service_class: type) -> None:
    """Register a resource service implementation.

    Parameters
    ----------
    name : str
        Resource name (e.g., 'bucket', 'instance')
    service_class : type
        Class implementing the ResourceService protocol, constructed with a
        region and optional boto3_client_factory
    """
    _SERVICES[name] = service_class


def get_service(name: str) -> type:
    """Get a registered service class by resource name.

    Raises
    ------
    ValueError
        If no service is registered under ``name``
    """
    if name not in _SERVICES:
        raise ValueError(f"Unknown resource: {name}")
    return _SERVICES[name]


def list_services() -> list[str]:
    """List all registered resource names."""
    return list(_SERVICES.keys())


def create_service(name: str, region: str, **kwargs: Any) -> ResourceService:
    """Construct the service registered under ``name`` bound to ``region``.

    Parameters
    ----------
    name : str
        Resource name
    region : str
        AWS region for the service's client
    **kwargs : Any
        Extra constructor arguments, such as boto3_client_factory

    Returns
    -------
    ResourceService
        Ready-to-use service

    Raises
    ------
    ValueError
        If no service is registered under ``name``
    ProviderConfigurationError
        If the service's client cannot be constructed
    """
    return get_service(name)(region, **kwargs)


__all__ = [
    "register_service",
    "get_service",
    "list_services",
    "create_service",
    "ProviderError",
    "ProviderConfigurationError",
    "ProviderCredentialsError",
    "ProviderAPIError",
]

register_service("bucket", BucketService)
register_service("instance", InstanceService)
