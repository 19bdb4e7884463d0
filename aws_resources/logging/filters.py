"""Logging filters routing records to stdout or stderr."""

import logging


class StreamRoutingFilter(logging.Filter):
    """Pass records below WARNING to stdout handlers and the rest to stderr.

    Parameters
    ----------
    stream : str
        Either "stdout" or "stderr"
    """

    def __init__(self, stream: str) -> None:
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"Unknown stream: {stream}")
        super().__init__()
        self.stream = stream

    def filter(self, record: logging.LogRecord) -> bool:
        if self.stream == "stderr":
            return record.levelno >= logging.WARNING
        return record.levelno < logging.WARNING
