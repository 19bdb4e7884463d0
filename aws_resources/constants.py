"""Global constants for aws-resources.

This module contains application-wide constants shared by the services, the
command-line surface and the interactive console.
"""

DEFAULT_REGION = "us-east-1"
"""Classic S3 region.

Buckets created here must not carry a location constraint; every other
region requires one. Also the console's initial region value.
"""

DEFAULT_INSTANCE_COUNT = 1
"""Number of EC2 instances launched when no count is given.

Also the fallback when a count string cannot be parsed as an integer.
"""

EXIT_SUCCESS = 0
"""Exit code indicating successful program completion."""

EXIT_ERROR = 1
"""Exit code for any validation, configuration, provider or runtime failure."""

SUCCESS_GLYPH = "✅"
"""Prefix for the short success line printed by the CLI."""

FAILURE_GLYPH = "❌"
"""Prefix for the short failure line printed by the CLI."""

BOTO_LOGGERS = ("botocore", "boto3", "urllib3")
"""Third-party loggers pinned to WARNING so SDK chatter stays out of output."""
