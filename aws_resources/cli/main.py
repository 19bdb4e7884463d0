"""CLI entry point for aws-resources."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

import click

from aws_resources.cli.output import format_result
from aws_resources.cli.parsing import (
    build_bucket_params,
    build_instance_params,
    resolve_cli_region,
)
from aws_resources.constants import (
    BOTO_LOGGERS,
    DEFAULT_INSTANCE_COUNT,
    DEFAULT_REGION,
    EXIT_ERROR,
)
from aws_resources.core.interfaces import ResourceService
from aws_resources.core.result import ResourceResult
from aws_resources.logging import StreamFormatter, StreamRoutingFilter
from aws_resources.providers import ProviderError, create_service
from aws_resources.utils import log_and_print_error

ServiceFactory = Callable[[str, str], ResourceService]

SERVICE_LABELS = {"bucket": "S3", "instance": "EC2"}


@dataclass(frozen=True)
class CLIOptions:
    """Global command-line options passed to every action.

    Attributes
    ----------
    region : str | None
        Region used when an action does not give its own
    verbose : bool
        Print results as indented JSON and log at INFO
    service_factory : ServiceFactory
        Factory taking (resource, region) and returning a service
    """

    region: str | None = None
    verbose: bool = False
    service_factory: ServiceFactory = create_service


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stdout/stderr and quiet the AWS SDK loggers.

    Parameters
    ----------
    verbose : bool
        Log at INFO instead of only errors
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(StreamFormatter("%(message)s"))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(StreamFormatter("%(message)s"))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )

    for boto_module in BOTO_LOGGERS:
        logging.getLogger(boto_module).setLevel(logging.WARNING)


def require_region(options: CLIOptions, region: str | None) -> str:
    """Resolve the action's region or exit when none is available."""
    target_region = resolve_cli_region(region, options.region)

    if not target_region:
        log_and_print_error("region is required")
        sys.exit(EXIT_ERROR)

    return target_region


def require_flag(value: Any, flag: str) -> None:
    if value is None or value == "":
        log_and_print_error("%s is required", flag)
        sys.exit(EXIT_ERROR)


def build_service(options: CLIOptions, resource: str, region: str) -> ResourceService:
    """Construct the resource's service or exit when its client cannot be built."""
    try:
        return options.service_factory(resource, region)
    except ProviderError as e:
        label = SERVICE_LABELS.get(resource, resource)
        logging.getLogger(__name__).debug("%s service construction failed: %s", label, e)
        print(f"Error creating {label} service: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


def apply_verbose(options: CLIOptions, verbose: bool) -> CLIOptions:
    """Merge an action-level ``--verbose`` flag into the global options."""
    if not verbose or options.verbose:
        return options

    logging.getLogger().setLevel(logging.INFO)
    return replace(options, verbose=True)


verbose_option = click.option("--verbose", "-v", is_flag=True, help="Verbose output")


def report(options: CLIOptions, result: ResourceResult) -> None:
    """Print the result and exit non-zero when it is a failure."""
    click.echo(format_result(result, verbose=options.verbose))

    if not result.success:
        sys.exit(EXIT_ERROR)


@click.group()
@click.option("--region", "-r", default=None, help="AWS region")
@verbose_option
@click.pass_context
def cli(ctx: click.Context, region: str | None, verbose: bool) -> None:
    """A CLI tool for creating AWS resources.

    Creates S3 buckets and EC2 instances through the AWS SDK. Credentials
    come from the standard AWS configuration chain.
    """
    overrides = ctx.obj if isinstance(ctx.obj, dict) else {}
    ctx.obj = CLIOptions(
        region=region or None,
        verbose=verbose,
        service_factory=overrides.get("service_factory", create_service),
    )

    if verbose:
        logging.getLogger().setLevel(logging.INFO)


@cli.group()
def bucket() -> None:
    """Manage S3 buckets."""


@bucket.command("create")
@click.option("--bucket-name", default=None, help="Name of the S3 bucket to create (required)")
@click.option(
    "--region", default=None, help="AWS region for the bucket (overrides global region)"
)
@verbose_option
@click.pass_obj
def create_bucket(
    options: CLIOptions, bucket_name: str | None, region: str | None, verbose: bool
) -> None:
    """Create an S3 bucket.

    Example:

      aws-resources bucket create --bucket-name my-app-logs-2024 --region us-east-1
    """
    options = apply_verbose(options, verbose)
    target_region = require_region(options, region)
    require_flag(bucket_name, "bucket-name")

    service = build_service(options, "bucket", target_region)
    result = service.create_resource(build_bucket_params(bucket_name, target_region))
    report(options, result)


@cli.group()
def instance() -> None:
    """Manage EC2 instances."""


@instance.command("create")
@click.option("--image-id", default=None, help="AMI ID to launch (required)")
@click.option("--instance-type", default=None, help="EC2 instance type (required)")
@click.option("--key-name", default=None, help="Name of the key pair (required)")
@click.option(
    "--count",
    type=int,
    default=DEFAULT_INSTANCE_COUNT,
    show_default=True,
    help="Number of instances to launch",
)
@click.option(
    "--region", default=None, help="AWS region for the instances (overrides global region)"
)
@verbose_option
@click.pass_obj
def create_instances(
    options: CLIOptions,
    image_id: str | None,
    instance_type: str | None,
    key_name: str | None,
    count: int,
    region: str | None,
    verbose: bool,
) -> None:
    """Launch EC2 instances.

    Example:

      aws-resources -r us-east-1 instance create --image-id ami-0abc
      --instance-type t2.micro --key-name my-key --count 2
    """
    options = apply_verbose(options, verbose)
    target_region = require_region(options, region)
    require_flag(image_id, "image-id")
    require_flag(instance_type, "instance-type")
    require_flag(key_name, "key-name")

    service = build_service(options, "instance", target_region)
    params = build_instance_params(image_id, instance_type, key_name, count, target_region)
    result = service.create_resource(params)
    report(options, result)


@cli.command()
@click.pass_obj
def console(options: CLIOptions) -> None:
    """Open the interactive console."""
    from aws_resources.tui import ResourcesConsole

    app = ResourcesConsole(
        service_factory=options.service_factory,
        default_region=options.region or DEFAULT_REGION,
    )
    app.run()


def main(args: list[str] | None = None) -> None:
    """Entry point for the click CLI with graceful error handling.

    Click runs outside standalone mode so that usage errors, such as an
    unknown option or a non-integer ``--count``, exit with the same
    status as every other failure.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments; defaults to ``sys.argv[1:]``
    """
    configure_logging()

    try:
        cli.main(args=args, prog_name="aws-resources", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(EXIT_ERROR)
    except click.Abort:
        print("Aborted!", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except ProviderError as e:
        log_and_print_error("%s", e)
        sys.exit(EXIT_ERROR)
    except RuntimeError as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
