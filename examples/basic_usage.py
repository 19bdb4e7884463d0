"""Programmatic use of the aws-resources services.

Creates a bucket and launches one instance in us-east-1 using the default
AWS credential chain, printing each result.
"""

import time

from aws_resources import BucketService, InstanceService
from aws_resources.utils import format_value


def print_result(label, result):
    print(f"{label}: success={result.success}, message={result.message}")
    if result.error:
        print(f"  error: {result.error}")
    for key, value in (result.data or {}).items():
        print(f"  {key}: {format_value(value)}")


def main():
    print("=== Example 1: creating an S3 bucket ===")
    bucket_service = BucketService("us-east-1")
    result = bucket_service.create_resource(
        {"bucket_name": f"example-bucket-{int(time.time())}", "region": "us-east-1"}
    )
    print_result("S3", result)

    print("\n=== Example 2: launching an EC2 instance ===")
    instance_service = InstanceService("us-east-1")
    result = instance_service.create_resource(
        {
            "image_id": "ami-0c94855ba95b798c7",
            "instance_type": "t2.micro",
            "key_name": "my-key",
            "count": "1",
            "region": "us-east-1",
        }
    )
    print_result("EC2", result)


if __name__ == "__main__":
    main()
