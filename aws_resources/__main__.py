#!/usr/bin/env python3
"""aws-resources - create S3 buckets and EC2 instances from the terminal."""

from aws_resources.cli.main import main

if __name__ == "__main__":
    main()
