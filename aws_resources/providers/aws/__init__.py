"""AWS resource services."""

from __future__ import annotations

from aws_resources.providers.aws.base import BaseService
from aws_resources.providers.aws.ec2 import InstanceService
from aws_resources.providers.aws.s3 import BucketService

__all__ = ["BaseService", "BucketService", "InstanceService"]
