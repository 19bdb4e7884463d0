"""S3 bucket creation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from aws_resources.core.params import (
    BucketRequest,
    ParameterValidationError,
    check_string_param,
    resolve_region,
)
from aws_resources.core.result import ErrorKind, ResourceResult
from aws_resources.providers.aws.base import BaseService
from aws_resources.providers.aws.errors import BUCKET_ERROR_CODES
from aws_resources.providers.exceptions import ProviderConfigurationError

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = ("bucket_name",)


class BucketService(BaseService):
    """Create S3 buckets.

    Parameters
    ----------
    region : str
        Default AWS region for new buckets
    boto3_client_factory : Callable[..., Any] | None
        Optional factory for creating boto3 clients. If None, uses boto3.client
    """

    service_name = "s3"

    def create_resource(self, params: Mapping[str, Any]) -> ResourceResult:
        """Create an S3 bucket.

        Parameters
        ----------
        params : Mapping[str, Any]
            ``bucket_name`` (required) and ``region`` (optional override)

        Returns
        -------
        ResourceResult
            On success, ``data`` holds ``bucket_name``, ``region`` and the
            provider's ``location``
        """
        try:
            request = self._build_request(params)
        except ParameterValidationError as e:
            return ResourceResult.failure(ErrorKind.VALIDATION, str(e))

        try:
            client = self.client_for(request.region)
        except ProviderConfigurationError as e:
            return ResourceResult.failure(
                ErrorKind.CONFIGURATION,
                f"Failed to configure AWS client for region {request.region}: {e}",
            )

        logger.info("Creating S3 bucket '%s' in %s", request.bucket_name, request.region)

        try:
            response = client.create_bucket(**request.to_boto_kwargs())
        except (ClientError, BotoCoreError) as e:
            name = request.bucket_name
            return self.failure_from_boto_error(
                e,
                BUCKET_ERROR_CODES,
                {
                    ErrorKind.BUCKET_ALREADY_EXISTS: (
                        f"Bucket '{name}' already exists and is owned by another account"
                    ),
                    ErrorKind.BUCKET_ALREADY_OWNED_BY_YOU: (
                        f"Bucket '{name}' already exists and is owned by you"
                    ),
                },
                "Failed to create bucket",
            )

        return ResourceResult.ok(
            f"Successfully created S3 bucket '{request.bucket_name}' "
            f"in region '{request.region}'",
            {
                "bucket_name": request.bucket_name,
                "region": request.region,
                "location": response.get("Location") or "",
            },
        )

    def _build_request(self, params: Mapping[str, Any]) -> BucketRequest:
        bucket_name = check_string_param(params, "bucket_name")
        region = resolve_region(params, self.region)
        self.validate_required_params(params, REQUIRED_PARAMS)
        return BucketRequest(bucket_name=bucket_name, region=region)
