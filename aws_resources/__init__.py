"""Command-line and terminal UI front end for creating AWS resources."""

from __future__ import annotations

from aws_resources.core import ErrorKind, ResourceResult, ResourceService
from aws_resources.providers import create_service
from aws_resources.providers.aws import BucketService, InstanceService

__version__ = "0.1.0"

__all__ = [
    "BucketService",
    "InstanceService",
    "ErrorKind",
    "ResourceResult",
    "ResourceService",
    "create_service",
]
