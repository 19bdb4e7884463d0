"""Create actions run by the console's worker threads."""

from __future__ import annotations

import logging
from collections.abc import Callable

from aws_resources.core.interfaces import ResourceService
from aws_resources.core.result import ErrorKind, ResourceResult
from aws_resources.providers import ProviderError
from aws_resources.tui.model import SubmitBucket, SubmitInstance

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[str, str], ResourceService]


def _build(
    service_factory: ServiceFactory, resource: str, label: str, region: str
) -> ResourceService | ResourceResult:
    try:
        return service_factory(resource, region)
    except (ProviderError, ValueError) as e:
        logger.error("Failed to create %s service: %s", label, e)
        return ResourceResult.failure(
            ErrorKind.SERVICE, f"Failed to create {label} service: {e}"
        )


def create_bucket(command: SubmitBucket, service_factory: ServiceFactory) -> ResourceResult:
    """Create a bucket from the console's bucket form.

    Parameters
    ----------
    command : SubmitBucket
        Form contents
    service_factory : ServiceFactory
        Factory taking (resource, region) and returning a service

    Returns
    -------
    ResourceResult
        Result to show on the result screen
    """
    if not command.bucket_name:
        return ResourceResult.failure(ErrorKind.VALIDATION, "Bucket name is required")

    service = _build(service_factory, "bucket", "S3", command.region)
    if isinstance(service, ResourceResult):
        return service

    try:
        return service.create_resource(
            {"bucket_name": command.bucket_name, "region": command.region}
        )
    except Exception as e:
        logger.exception("Unexpected error while creating bucket")
        return ResourceResult.failure(ErrorKind.CREATION, f"Failed to create bucket: {e}")


def create_instances(
    command: SubmitInstance, service_factory: ServiceFactory
) -> ResourceResult:
    """Launch instances from the console's instance form.

    Parameters
    ----------
    command : SubmitInstance
        Form contents; ``count`` is passed to the service as typed
    service_factory : ServiceFactory
        Factory taking (resource, region) and returning a service

    Returns
    -------
    ResourceResult
        Result to show on the result screen
    """
    if not command.image_id or not command.instance_type or not command.key_name:
        return ResourceResult.failure(
            ErrorKind.VALIDATION, "Image ID, instance type, and key name are required"
        )

    service = _build(service_factory, "instance", "EC2", command.region)
    if isinstance(service, ResourceResult):
        return service

    try:
        return service.create_resource(
            {
                "image_id": command.image_id,
                "instance_type": command.instance_type,
                "key_name": command.key_name,
                "count": command.count,
                "region": command.region,
            }
        )
    except Exception as e:
        logger.exception("Unexpected error while launching instances")
        return ResourceResult.failure(
            ErrorKind.CREATION, f"Failed to create instances: {e}"
        )


def run_command(
    command: SubmitBucket | SubmitInstance, service_factory: ServiceFactory
) -> ResourceResult:
    """Dispatch a submit command to its create action."""
    if isinstance(command, SubmitBucket):
        return create_bucket(command, service_factory)
    return create_instances(command, service_factory)
