"""Core aws-resources types."""

from __future__ import annotations

from aws_resources.core.interfaces import ResourceService
from aws_resources.core.params import (
    BucketRequest,
    InstanceRequest,
    ParameterValidationError,
    find_missing_params,
)
from aws_resources.core.result import ErrorKind, ResourceResult

__all__ = [
    "ResourceService",
    "ResourceResult",
    "ErrorKind",
    "ParameterValidationError",
    "BucketRequest",
    "InstanceRequest",
    "find_missing_params",
]
