"""EC2 instance launching."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from aws_resources.core.params import (
    InstanceRequest,
    ParameterValidationError,
    check_string_param,
    resolve_count,
    resolve_region,
)
from aws_resources.core.result import ErrorKind, ResourceResult
from aws_resources.providers.aws.base import BaseService
from aws_resources.providers.aws.errors import INSTANCE_ERROR_CODES
from aws_resources.providers.exceptions import ProviderConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = ("image_id", "instance_type", "key_name")


def summarize_instance(instance: dict[str, Any]) -> dict[str, Any]:
    """Reduce a run_instances instance description to the reported fields.

    Parameters
    ----------
    instance : dict[str, Any]
        Instance entry from a boto3 run_instances response

    Returns
    -------
    dict[str, Any]
        instance_id, state, image_id, instance_type and key_name
    """
    return {
        "instance_id": instance.get("InstanceId", ""),
        "state": instance.get("State", {}).get("Name", ""),
        "image_id": instance.get("ImageId", ""),
        "instance_type": instance.get("InstanceType", ""),
        "key_name": instance.get("KeyName", ""),
    }


class InstanceService(BaseService):
    """Launch EC2 instances.

    Parameters
    ----------
    region : str
        Default AWS region for launches
    boto3_client_factory : Callable[..., Any] | None
        Optional factory for creating boto3 clients. If None, uses boto3.client
    """

    service_name = "ec2"

    def create_resource(self, params: Mapping[str, Any]) -> ResourceResult:
        """Launch an exact number of EC2 instances.

        Validation runs in a fixed order: field types, required-field
        presence, count resolution, count range, and finally client
        rebinding for a region override.

        Parameters
        ----------
        params : Mapping[str, Any]
            ``image_id``, ``instance_type``, ``key_name`` (required),
            ``count`` and ``region`` (optional)

        Returns
        -------
        ResourceResult
            On success, ``data`` holds the launched ``instances`` plus the
            request's ``region``, ``image_id``, ``instance_type``,
            ``key_name`` and ``count``
        """
        try:
            image_id = check_string_param(params, "image_id")
            instance_type = check_string_param(params, "instance_type")
            key_name = check_string_param(params, "key_name")
        except ParameterValidationError as e:
            return ResourceResult.failure(ErrorKind.VALIDATION, str(e))

        try:
            self.validate_required_params(params, REQUIRED_PARAMS)
        except ParameterValidationError as e:
            return ResourceResult.failure(ErrorKind.VALIDATION, str(e))

        count = resolve_count(params.get("count"))

        if count < 1:
            return ResourceResult.failure(ErrorKind.VALIDATION, "count must be at least 1")

        region = resolve_region(params, self.region)

        try:
            client = self.client_for(region)
        except ProviderConfigurationError as e:
            return ResourceResult.failure(
                ErrorKind.CONFIGURATION,
                f"Failed to configure AWS client for region {region}: {e}",
            )

        request = InstanceRequest(
            image_id=image_id,
            instance_type=instance_type,
            key_name=key_name,
            count=count,
            region=region,
        )

        logger.info(
            "Launching %d %s instance(s) from %s in %s",
            request.count,
            request.instance_type,
            request.image_id,
            request.region,
        )

        try:
            response = client.run_instances(**request.to_boto_kwargs())
        except (ClientError, BotoCoreError) as e:
            return self.failure_from_boto_error(
                e,
                INSTANCE_ERROR_CODES,
                {
                    ErrorKind.INVALID_AMI_ID: f"Invalid AMI ID: {request.image_id}",
                    ErrorKind.INVALID_KEY_PAIR: f"Invalid key pair: {request.key_name}",
                },
                "Failed to launch instances",
            )

        instances = [summarize_instance(i) for i in response.get("Instances", [])]

        return ResourceResult.ok(
            f"Successfully launched {request.count} EC2 instance(s) "
            f"in region '{request.region}'",
            {
                "instances": instances,
                "region": request.region,
                "image_id": request.image_id,
                "instance_type": request.instance_type,
                "key_name": request.key_name,
                "count": request.count,
            },
        )
