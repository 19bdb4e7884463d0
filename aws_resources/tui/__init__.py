"""Interactive console for aws-resources."""

from aws_resources.tui.app import ResourcesConsole

__all__ = ["ResourcesConsole"]
