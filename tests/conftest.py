"""Pytest configuration and fixtures for aws-resources tests."""

import logging
import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from aws_resources.core.result import ResourceResult

AWS_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_DEFAULT_REGION",
)


@pytest.fixture(autouse=True)
def restore_root_log_level() -> Generator[None, None, None]:
    """Restore the root logger level changed by verbose runs and the console."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    root_logger.setLevel(level)


@pytest.fixture
def aws_credentials() -> Generator[None, None, None]:
    """Fixture to set AWS credentials for testing with proper cleanup.

    Sets mock AWS credentials in environment variables for the duration of the test,
    then restores the original environment state.

    Yields
    ------
    None
        Control back to test after setting credentials
    """
    saved = {name: os.environ.get(name) for name in AWS_ENV_VARS}

    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"

    yield

    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def mocked_aws(aws_credentials) -> Generator[None, None, None]:
    """Mock all AWS interactions."""
    with mock_aws():
        yield


@pytest.fixture
def ami_id(mocked_aws) -> str:
    """Return the id of an image moto ships in us-east-1."""
    ec2_client = boto3.client("ec2", region_name="us-east-1")
    return ec2_client.describe_images()["Images"][0]["ImageId"]


@pytest.fixture
def key_pair(mocked_aws) -> str:
    """Create a key pair in us-east-1 and return its name."""
    ec2_client = boto3.client("ec2", region_name="us-east-1")
    ec2_client.create_key_pair(KeyName="test-key")
    return "test-key"


def make_client_error(code: str, message: str, operation: str) -> ClientError:
    """Build a botocore ClientError with a structured error code.

    Parameters
    ----------
    code : str
        Provider error code, e.g. "InvalidAMIID.NotFound"
    message : str
        Provider error message
    operation : str
        API operation name

    Returns
    -------
    ClientError
        Exception as boto3 would raise it
    """
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def client_error():
    """Return the ClientError builder."""
    return make_client_error


@pytest.fixture
def stub_client() -> MagicMock:
    """Return a MagicMock standing in for a boto3 client."""
    return MagicMock()


@pytest.fixture
def client_factory(stub_client: MagicMock) -> MagicMock:
    """Return a boto3 client factory that always yields ``stub_client``."""
    return MagicMock(return_value=stub_client)


class RecordingService:
    """In-memory resource service recording every parameter map it receives.

    Parameters
    ----------
    region : str
        Bound region
    result : ResourceResult
        Result returned by every call
    """

    def __init__(self, region: str, result: ResourceResult) -> None:
        self.region = region
        self.result = result
        self.calls: list[dict[str, Any]] = []

    def create_resource(self, params: dict[str, Any]) -> ResourceResult:
        self.calls.append(dict(params))
        return self.result


@pytest.fixture
def recording_factory():
    """Return a factory building ``RecordingService`` instances.

    The returned callable takes (resource, region) like the registry's
    ``create_service`` and keeps every service it built in ``built``.
    """

    class Factory:
        def __init__(self) -> None:
            self.result = ResourceResult.ok("done", {"key": "value"})
            self.built: list[tuple[str, RecordingService]] = []

        def __call__(self, resource: str, region: str) -> RecordingService:
            service = RecordingService(region, self.result)
            self.built.append((resource, service))
            return service

    return Factory()
