"""CLI option handling and result output."""

from __future__ import annotations

from aws_resources.cli.output import format_result
from aws_resources.cli.parsing import (
    build_bucket_params,
    build_instance_params,
    resolve_cli_region,
)

__all__ = [
    "format_result",
    "build_bucket_params",
    "build_instance_params",
    "resolve_cli_region",
]
