"""Unit tests for InstanceService."""

from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import NoCredentialsError

from aws_resources.providers.aws.ec2 import InstanceService, summarize_instance
from aws_resources.providers.exceptions import ProviderConfigurationError


def launch_params(**overrides) -> dict:
    """Return a valid instance parameter map with ``overrides`` applied."""
    params = {
        "image_id": "ami-0abcdef1234567890",
        "instance_type": "t2.micro",
        "key_name": "my-key",
    }
    params.update(overrides)
    return params


@pytest.fixture
def stubbed_service(client_factory: MagicMock) -> InstanceService:
    """Return an InstanceService whose boto3 client is a MagicMock."""
    return InstanceService(region="us-east-1", boto3_client_factory=client_factory)


@pytest.fixture
def instance_service(mocked_aws) -> InstanceService:
    """Return an InstanceService bound to us-east-1 against moto."""
    return InstanceService(region="us-east-1")


def test_summarize_instance() -> None:
    instance = {
        "InstanceId": "i-0123",
        "State": {"Code": 0, "Name": "pending"},
        "ImageId": "ami-1",
        "InstanceType": "t2.micro",
        "KeyName": "k",
        "PrivateIpAddress": "10.0.0.1",
    }

    assert summarize_instance(instance) == {
        "instance_id": "i-0123",
        "state": "pending",
        "image_id": "ami-1",
        "instance_type": "t2.micro",
        "key_name": "k",
    }


def test_summarize_instance_tolerates_missing_fields() -> None:
    assert summarize_instance({"InstanceId": "i-1"})["state"] == ""


def test_builds_ec2_client(client_factory) -> None:
    InstanceService(region="us-west-2", boto3_client_factory=client_factory)

    client_factory.assert_called_once_with("ec2", region_name="us-west-2")


def test_empty_region_raises(client_factory) -> None:
    with pytest.raises(ProviderConfigurationError):
        InstanceService(region="", boto3_client_factory=client_factory)


class TestLaunchWithMoto:
    """Tests for instance launches against moto."""

    def test_launches_single_instance_by_default(
        self, instance_service, ami_id, key_pair
    ) -> None:
        result = instance_service.create_resource(
            {"image_id": ami_id, "instance_type": "t2.micro", "key_name": key_pair}
        )

        assert result.success is True
        assert result.message == (
            "Successfully launched 1 EC2 instance(s) in region 'us-east-1'"
        )
        assert result.data["count"] == 1
        assert result.data["region"] == "us-east-1"
        assert result.data["image_id"] == ami_id
        assert result.data["instance_type"] == "t2.micro"
        assert result.data["key_name"] == key_pair
        assert len(result.data["instances"]) == 1
        assert result.data["instances"][0]["instance_id"].startswith("i-")

    def test_launches_exact_count(self, instance_service, ami_id, key_pair) -> None:
        result = instance_service.create_resource(
            {
                "image_id": ami_id,
                "instance_type": "t3.small",
                "key_name": key_pair,
                "count": 3,
            }
        )

        assert result.success is True
        assert result.data["count"] == 3
        assert len(result.data["instances"]) == 3

        ec2 = boto3.client("ec2", region_name="us-east-1")
        reservations = ec2.describe_instances()["Reservations"]
        launched = [i for r in reservations for i in r["Instances"]]
        assert len(launched) == 3

    def test_numeric_string_count(self, instance_service, ami_id, key_pair) -> None:
        result = instance_service.create_resource(
            {
                "image_id": ami_id,
                "instance_type": "t2.micro",
                "key_name": key_pair,
                "count": "2",
            }
        )

        assert result.data["count"] == 2
        assert len(result.data["instances"]) == 2


class TestRunInstancesRequest:
    """Tests for the run_instances call built from the parameter map."""

    def test_min_and_max_count_match(self, stubbed_service, stub_client) -> None:
        stub_client.run_instances.return_value = {"Instances": []}

        stubbed_service.create_resource(launch_params(count=4))

        stub_client.run_instances.assert_called_once_with(
            ImageId="ami-0abcdef1234567890",
            InstanceType="t2.micro",
            KeyName="my-key",
            MinCount=4,
            MaxCount=4,
        )

    @pytest.mark.parametrize("count", [None, "abc", 2.5, [3]])
    def test_unusable_count_falls_back_to_one(
        self, stubbed_service, stub_client, count
    ) -> None:
        stub_client.run_instances.return_value = {"Instances": []}

        result = stubbed_service.create_resource(launch_params(count=count))

        assert result.success is True
        assert result.data["count"] == 1
        kwargs = stub_client.run_instances.call_args.kwargs
        assert kwargs["MinCount"] == kwargs["MaxCount"] == 1

    def test_data_reports_provider_instances(self, stubbed_service, stub_client) -> None:
        stub_client.run_instances.return_value = {
            "Instances": [{"InstanceId": "i-1", "State": {"Name": "pending"}}]
        }

        result = stubbed_service.create_resource(launch_params(count=2))

        assert result.data["count"] == 2
        assert [i["instance_id"] for i in result.data["instances"]] == ["i-1"]

    def test_region_override_rebinds_client(self, stubbed_service, client_factory) -> None:
        rebound = MagicMock()
        rebound.run_instances.return_value = {"Instances": []}
        client_factory.side_effect = lambda service, region_name: rebound

        result = stubbed_service.create_resource(launch_params(region="eu-central-1"))

        client_factory.assert_called_with("ec2", region_name="eu-central-1")
        rebound.run_instances.assert_called_once()
        assert result.data["region"] == "eu-central-1"
        assert "'eu-central-1'" in result.message

    def test_region_override_failure(self, stubbed_service, client_factory) -> None:
        client_factory.side_effect = ValueError("Provided region_name 'x y' doesn't match")

        result = stubbed_service.create_resource(launch_params(region="x y"))

        assert result.success is False
        assert result.error == "ConfigurationError"
        assert result.message.startswith("Failed to configure AWS client for region x y")


class TestValidation:
    """Tests for the fixed validation order."""

    @pytest.mark.parametrize("field", ["image_id", "instance_type", "key_name"])
    def test_non_string_field(self, stubbed_service, stub_client, field) -> None:
        result = stubbed_service.create_resource(launch_params(**{field: 123}))

        assert result.error == "ValidationError"
        assert result.message == f"{field} must be a string"
        stub_client.run_instances.assert_not_called()

    @pytest.mark.parametrize("count", [0, -1, "0", "-5"])
    def test_count_below_one(self, stubbed_service, stub_client, count) -> None:
        result = stubbed_service.create_resource(launch_params(count=count))

        assert result.error == "ValidationError"
        assert result.message == "count must be at least 1"
        stub_client.run_instances.assert_not_called()

    def test_missing_fields_are_aggregated(self, stubbed_service, stub_client) -> None:
        result = stubbed_service.create_resource({"instance_type": "t2.micro"})

        assert result.error == "ValidationError"
        assert "image_id" in result.message
        assert "key_name" in result.message
        assert "instance_type" not in result.message
        stub_client.run_instances.assert_not_called()

    def test_type_check_precedes_count_check(self, stubbed_service) -> None:
        result = stubbed_service.create_resource(launch_params(key_name=7, count=0))

        assert result.message == "key_name must be a string"

    def test_missing_check_precedes_count_check(self, stubbed_service) -> None:
        result = stubbed_service.create_resource({"count": 0})

        assert result.error == "ValidationError"
        assert result.message == (
            "missing required parameters: image_id, instance_type, key_name"
        )

    def test_missing_check_precedes_rebind(
        self, stubbed_service, client_factory, stub_client
    ) -> None:
        client_factory.side_effect = ValueError("bad region")

        result = stubbed_service.create_resource({"region": "nowhere"})

        assert result.error == "ValidationError"
        assert result.message == (
            "missing required parameters: image_id, instance_type, key_name"
        )
        assert client_factory.call_count == 1
        stub_client.run_instances.assert_not_called()

    def test_none_field_is_missing(self, stubbed_service, client_factory) -> None:
        result = stubbed_service.create_resource(
            launch_params(key_name=None, count=0, region="eu-west-1")
        )

        assert result.message == "missing required parameters: key_name"
        client_factory.assert_called_once_with("ec2", region_name="us-east-1")


class TestProviderErrors:
    """Tests for classification of run_instances failures."""

    @pytest.mark.parametrize("code", ["InvalidAMIID.NotFound", "InvalidAMIID.Malformed"])
    def test_invalid_ami(self, stubbed_service, stub_client, client_error, code) -> None:
        stub_client.run_instances.side_effect = client_error(
            code, "The image id '[ami-bad]' does not exist", "RunInstances"
        )

        result = stubbed_service.create_resource(launch_params(image_id="ami-bad"))

        assert result.success is False
        assert result.error == "InvalidAMIID"
        assert result.message == "Invalid AMI ID: ami-bad"

    def test_invalid_key_pair(self, stubbed_service, stub_client, client_error) -> None:
        stub_client.run_instances.side_effect = client_error(
            "InvalidKeyPair.NotFound", "The key pair 'nope' does not exist", "RunInstances"
        )

        result = stubbed_service.create_resource(launch_params(key_name="nope"))

        assert result.error == "InvalidKeyPair"
        assert result.message == "Invalid key pair: nope"

    def test_unknown_error(self, stubbed_service, stub_client, client_error) -> None:
        stub_client.run_instances.side_effect = client_error(
            "InsufficientInstanceCapacity", "No capacity", "RunInstances"
        )

        result = stubbed_service.create_resource(launch_params())

        assert result.error == "UnknownError"
        assert result.message == "Failed to launch instances: No capacity"
        assert stub_client.run_instances.call_count == 1

    def test_missing_credentials(self, stubbed_service, stub_client) -> None:
        stub_client.run_instances.side_effect = NoCredentialsError()

        result = stubbed_service.create_resource(launch_params())

        assert result.error == "CredentialsError"
