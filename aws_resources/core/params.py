"""Parameter-map helpers and typed request records.

Services accept a loosely typed parameter map. These helpers check and
convert it into immutable request records, so the boto3 call is only ever
built from validated values.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from aws_resources.constants import DEFAULT_INSTANCE_COUNT, DEFAULT_REGION

logger = logging.getLogger(__name__)

COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ParameterValidationError(ValueError):
    """Raised when a parameter map fails validation.

    Parameters
    ----------
    message : str
        Human-readable explanation
    missing : list[str] | None
        Required keys that were absent, empty or None
    field : str | None
        Single offending field for type errors
    """

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.missing = missing or []
        self.field = field


def is_missing(value: Any) -> bool:
    """Return True for values treated as absent (None or empty string)."""
    return value is None or value == ""


def find_missing_params(params: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Collect every required key that is absent, None or an empty string.

    Parameters
    ----------
    params : Mapping[str, Any]
        Parameter map to check
    required : Iterable[str]
        Required keys, in reporting order

    Returns
    -------
    list[str]
        Missing keys in the order given by ``required``
    """
    return [key for key in required if is_missing(params.get(key))]


def missing_params_message(missing: list[str]) -> str:
    return f"missing required parameters: {', '.join(missing)}"


def check_string_param(params: Mapping[str, Any], field: str) -> str | None:
    """Return a string parameter, or None when it is absent.

    Raises
    ------
    ParameterValidationError
        If the value is present but not a string
    """
    value = params.get(field)

    if value is None:
        return None

    if not isinstance(value, str):
        raise ParameterValidationError(f"{field} must be a string", field=field)

    return value


def resolve_region(params: Mapping[str, Any], default: str) -> str:
    """Return the per-call region override, or ``default`` when none is given."""
    region = params.get("region")

    if isinstance(region, str) and region:
        return region

    return default


def resolve_count(value: Any) -> int:
    """Resolve the instance count from a parameter value.

    Native integers are taken verbatim. Strings are parsed only when they are
    an optionally signed run of ASCII digits, so padding, underscores and
    non-numeric text are rejected. Absent values, rejected strings and any
    other type fall back to the default count.

    Parameters
    ----------
    value : Any
        Raw ``count`` value from the parameter map

    Returns
    -------
    int
        Resolved count; may be zero or negative, range checks are left to
        the caller
    """
    if value is None:
        return DEFAULT_INSTANCE_COUNT

    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str):
        if COUNT_PATTERN.fullmatch(value):
            return int(value)

        logger.warning(
            "Ignoring non-numeric count %r, using default of %d",
            value,
            DEFAULT_INSTANCE_COUNT,
        )
        return DEFAULT_INSTANCE_COUNT

    logger.warning(
        "Ignoring count of type %s, using default of %d",
        type(value).__name__,
        DEFAULT_INSTANCE_COUNT,
    )
    return DEFAULT_INSTANCE_COUNT


@dataclass(frozen=True)
class BucketRequest:
    """Validated S3 bucket creation request."""

    bucket_name: str
    region: str

    def to_boto_kwargs(self) -> dict[str, Any]:
        """Build ``create_bucket`` keyword arguments.

        The classic region must not be named as a location constraint; every
        other region must be.
        """
        kwargs: dict[str, Any] = {"Bucket": self.bucket_name}

        if self.region and self.region != DEFAULT_REGION:
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": self.region}

        return kwargs


@dataclass(frozen=True)
class InstanceRequest:
    """Validated EC2 instance launch request."""

    image_id: str
    instance_type: str
    key_name: str
    count: int
    region: str

    def to_boto_kwargs(self) -> dict[str, Any]:
        """Build ``run_instances`` keyword arguments for an exact count."""
        return {
            "ImageId": self.image_id,
            "InstanceType": self.instance_type,
            "KeyName": self.key_name,
            "MinCount": self.count,
            "MaxCount": self.count,
        }
