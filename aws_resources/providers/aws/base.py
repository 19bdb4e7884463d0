"""Common functionality for AWS resource services."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from aws_resources.core.params import (
    ParameterValidationError,
    find_missing_params,
    missing_params_message,
)
from aws_resources.core.result import ErrorKind, ResourceResult
from aws_resources.providers.aws.errors import classify_error_code, translate_boto_error
from aws_resources.providers.exceptions import (
    ProviderAPIError,
    ProviderConfigurationError,
    ProviderCredentialsError,
)
from aws_resources.utils import get_aws_credentials_error_message

logger = logging.getLogger(__name__)


class BaseService:
    """Region binding, client construction and parameter checks for services.

    Subclasses set ``service_name`` to the boto3 service they call and
    implement ``create_resource``.

    Parameters
    ----------
    region : str
        AWS region the client is bound to
    boto3_client_factory : Callable[..., Any] | None
        Optional factory for creating boto3 clients. If None, uses boto3.client

    Raises
    ------
    ProviderConfigurationError
        If the client cannot be constructed for ``region``
    """

    service_name = ""

    def __init__(
        self,
        region: str,
        boto3_client_factory: Callable[..., Any] | None = None,
    ) -> None:
        self.region = region
        self.boto3_client_factory = boto3_client_factory or boto3.client
        self.client = self._build_client(region)

    def _build_client(self, region: str) -> Any:
        if not region:
            raise ProviderConfigurationError("region is required", region=region)

        try:
            return self.boto3_client_factory(self.service_name, region_name=region)
        except (BotoCoreError, ValueError) as e:
            raise ProviderConfigurationError(
                f"failed to load AWS config: {e}", region=region
            ) from e

    def client_for(self, region: str) -> Any:
        """Return a client bound to ``region``.

        The service's own client is reused for its bound region; any other
        region gets a freshly built client for this call only.

        Raises
        ------
        ProviderConfigurationError
            If a client cannot be built for ``region``
        """
        if region == self.region:
            return self.client

        logger.debug("Rebinding %s client from %s to %s", self.service_name, self.region, region)
        return self._build_client(region)

    def validate_required_params(
        self, params: Mapping[str, Any], required: Iterable[str]
    ) -> None:
        """Validate that all required parameters are provided.

        Parameters
        ----------
        params : Mapping[str, Any]
            Parameter map to check
        required : Iterable[str]
            Required keys

        Raises
        ------
        ParameterValidationError
            Listing every key that is absent, None or an empty string
        """
        missing = find_missing_params(params, required)

        if missing:
            raise ParameterValidationError(missing_params_message(missing), missing=missing)

    def failure_from_boto_error(
        self,
        error: ClientError | BotoCoreError,
        known_codes: Iterable[tuple[str, ErrorKind]],
        messages: Mapping[ErrorKind, str],
        fallback_prefix: str,
    ) -> ResourceResult:
        """Translate a failed boto3 call into a failed result.

        Parameters
        ----------
        error : ClientError | BotoCoreError
            Exception raised by the boto3 call
        known_codes : Iterable[tuple[str, ErrorKind]]
            Error code families recognized for this resource
        messages : Mapping[ErrorKind, str]
            Message for each recognized kind
        fallback_prefix : str
            Prefix for the raw provider message of unrecognized failures

        Returns
        -------
        ResourceResult
            Failed result with the recognized kind, or ``UnknownError``
        """
        provider_error = translate_boto_error(error)

        if isinstance(provider_error, ProviderCredentialsError):
            logger.warning("AWS credentials not found: %s", provider_error)
            return ResourceResult.failure(
                ErrorKind.CREDENTIALS, get_aws_credentials_error_message()
            )

        error_code = ""
        if isinstance(provider_error, ProviderAPIError):
            error_code = provider_error.error_code

        kind = classify_error_code(error_code, known_codes)
        logger.warning(
            "%s call failed (%s): %s",
            self.service_name,
            error_code or "no code",
            provider_error,
        )

        if kind is not None and kind in messages:
            return ResourceResult.failure(kind, messages[kind])

        return ResourceResult.failure(ErrorKind.UNKNOWN, f"{fallback_prefix}: {provider_error}")
