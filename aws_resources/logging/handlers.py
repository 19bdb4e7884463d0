"""Logging handler feeding the console's log panel."""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from textual.message import Message

if TYPE_CHECKING:
    from aws_resources.tui.app import ResourcesConsole

logger = logging.getLogger(__name__)

LineSink = Callable[[Iterable[str]], object]


class TuiLogMessage(Message):
    """Formatted log lines posted from a worker thread.

    Parameters
    ----------
    lines : tuple[str, ...]
        One entry per line of the formatted record
    """

    def __init__(self, lines: tuple[str, ...]) -> None:
        self.lines = lines
        super().__init__()


class TuiLogHandler(logging.Handler):
    """Logging handler that appends records to the console's log panel.

    A formatted record is split into lines, so tracebacks and multi-line
    provider messages keep their shape in the panel. Records logged on the
    app's own thread go straight to ``write_lines``; records from create
    workers are posted to the app as ``TuiLogMessage`` and written by its
    message handler.

    Parameters
    ----------
    app : ResourcesConsole
        Running console app
    write_lines : LineSink
        Callable appending lines to the panel, usually ``Log.write_lines``
    """

    def __init__(self, app: "ResourcesConsole", write_lines: LineSink) -> None:
        super().__init__()
        self.app = app
        self.write_lines = write_lines

    def on_app_thread(self) -> bool:
        return self.app._thread_id == threading.get_ident()

    def emit(self, record: logging.LogRecord) -> None:
        lines = tuple(self.format(record).splitlines()) or ("",)

        try:
            if not self.app.is_running:
                return

            if self.on_app_thread():
                self.write_lines(lines)
            else:
                self.app.post_message(TuiLogMessage(lines))
        except (RuntimeError, AttributeError) as e:
            logger.debug("Dropped log record for console panel: %s", e)
