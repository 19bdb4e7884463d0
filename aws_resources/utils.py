"""Utility functions for aws-resources."""

import logging
import sys
from typing import Any


def log_and_print_error(message: str, *args: Any) -> None:
    """Log error message and print to stderr.

    Parameters
    ----------
    message : str
        Error message with optional format placeholders
    *args : Any
        Format arguments for message
    """
    logging.getLogger(__name__).debug(message, *args)
    formatted_msg = message % args if args else message
    print(f"Error: {formatted_msg}", file=sys.stderr)


def get_aws_credentials_error_message() -> str:
    """Get standard AWS credentials error message.

    Kept to a single line so it fits the short CLI output.

    Returns
    -------
    str
        AWS credentials error message
    """
    return (
        "AWS credentials not found. Run 'aws configure' or set "
        "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY"
    )


def format_value(value: Any) -> str:
    """Format a result data value for single-line display.

    Lists of mappings (such as launched instances) are flattened to their
    identifying values.

    Parameters
    ----------
    value : Any
        Value from a result's data mapping

    Returns
    -------
    str
        Display text
    """
    if isinstance(value, list):
        parts = []
        for item in value:
            if isinstance(item, dict):
                parts.append(str(item.get("instance_id") or item))
            else:
                parts.append(str(item))
        return ", ".join(parts) if parts else "(none)"

    if value == "" or value is None:
        return "(none)"

    return str(value)
