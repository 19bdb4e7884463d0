"""Logging helpers for the command line and the console."""

from aws_resources.logging.filters import StreamRoutingFilter
from aws_resources.logging.formatters import StreamFormatter
from aws_resources.logging.handlers import TuiLogHandler, TuiLogMessage

__all__ = ["StreamFormatter", "StreamRoutingFilter", "TuiLogHandler", "TuiLogMessage"]
