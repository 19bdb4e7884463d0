"""Protocols shared by the front ends and the provider services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from aws_resources.core.result import ResourceResult


@runtime_checkable
class ResourceService(Protocol):
    """A service binding one resource type to exactly one creation operation.

    Attributes
    ----------
    region : str
        Region the service's client is bound to
    """

    region: str

    def create_resource(self, params: Mapping[str, Any]) -> ResourceResult:
        """Create the resource described by ``params``.

        Provider failures are reported through the returned result, never
        raised.

        Parameters
        ----------
        params : Mapping[str, Any]
            Action-specific parameter map

        Returns
        -------
        ResourceResult
            Outcome of the single provider call
        """
        ...
