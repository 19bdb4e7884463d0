"""Logging formatters for console output."""

import logging


class StreamFormatter(logging.Formatter):
    """Logging formatter that prefixes warnings and errors with their level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a level prefix for warnings and errors.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message with optional level prefix
        """
        msg = super().format(record)

        if record.levelno >= logging.ERROR:
            return f"[error] {msg}"
        elif record.levelno >= logging.WARNING:
            return f"[warning] {msg}"

        return msg
