"""CLI option handling and parameter-map conversion utilities."""

from __future__ import annotations

from typing import Any


def resolve_cli_region(action_region: str | None, global_region: str | None) -> str | None:
    """Pick the action-level region, falling back to the global one.

    Parameters
    ----------
    action_region : str | None
        ``--region`` given on the action
    global_region : str | None
        ``--region``/``-r`` given on the root command

    Returns
    -------
    str | None
        Effective region, or None when neither is set
    """
    for candidate in (action_region, global_region):
        if candidate and candidate.strip():
            return candidate.strip()

    return None


def build_bucket_params(bucket_name: str, region: str) -> dict[str, Any]:
    """Build the parameter map for bucket creation."""
    return {"bucket_name": bucket_name, "region": region}


def build_instance_params(
    image_id: str,
    instance_type: str,
    key_name: str,
    count: Any,
    region: str,
) -> dict[str, Any]:
    """Build the parameter map for instance creation.

    ``count`` is passed through as typed; the service parses numeric strings
    and falls back to the default count for anything else.
    """
    return {
        "image_id": image_id,
        "instance_type": instance_type,
        "key_name": key_name,
        "count": count,
        "region": region,
    }
