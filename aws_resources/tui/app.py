"""Textual application for the aws-resources console."""

from __future__ import annotations

import logging
from functools import partial

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.message import Message
from textual.widgets import Log, Static

from aws_resources.constants import BOTO_LOGGERS, DEFAULT_REGION
from aws_resources.core.result import ErrorKind, ResourceResult
from aws_resources.logging import StreamFormatter, TuiLogHandler, TuiLogMessage
from aws_resources.providers import create_service
from aws_resources.tui.actions import ServiceFactory, run_command
from aws_resources.tui.model import (
    ConsoleModel,
    Quit,
    SubmitBucket,
    SubmitInstance,
    apply_result,
    initial_model,
    update,
)
from aws_resources.tui.styling import CONSOLE_CSS
from aws_resources.tui.view import render

logger = logging.getLogger(__name__)


class ResultMessage(Message):
    """Message delivering a finished create action's result to the app."""

    def __init__(self, result: ResourceResult) -> None:
        self.result = result
        super().__init__()


class ConsoleView(Static):
    """Focusable screen body that forwards every key to the console model."""

    can_focus = True

    def on_key(self, event: events.Key) -> None:
        """Hand the key to the app and keep it from reaching default bindings.

        Parameters
        ----------
        event : events.Key
            Key event
        """
        event.stop()
        event.prevent_default()
        self.app.handle_key(event.key, event.character)


class ResourcesConsole(App):
    """Menu-driven console for creating S3 buckets and EC2 instances.

    The console state lives in an immutable ``ConsoleModel``. Key presses and
    finished create actions produce a new model, and the screen body is
    re-rendered from it after every change.

    Parameters
    ----------
    service_factory : ServiceFactory | None
        Factory taking (resource, region) and returning a service. If None,
        services come from the provider registry
    default_region : str
        Initial region in both forms

    Attributes
    ----------
    model : ConsoleModel
        Current console state
    original_handlers : list[logging.Handler]
        Original logging handlers to restore on exit
    """

    CSS = CONSOLE_CSS

    BINDINGS = [Binding("ctrl+c", "quit", "Quit", priority=True)]

    def __init__(
        self,
        service_factory: ServiceFactory | None = None,
        default_region: str = DEFAULT_REGION,
    ) -> None:
        super().__init__()
        self.service_factory = service_factory or create_service
        self.model: ConsoleModel = initial_model(default_region)
        self.original_handlers: list[logging.Handler] = []
        self.log_widget: Log | None = None

    def compose(self) -> ComposeResult:
        """Compose the console layout.

        Yields
        ------
        Container
            Screen panel with the rendered console model
        Container
            Log panel
        """
        with Container(id="screen-panel"):
            yield ConsoleView(render(self.model), id="screen")
        with Container(id="log-panel"):
            log_widget = Log()
            log_widget.can_focus = False
            yield log_widget

    def on_mount(self) -> None:
        """Handle mount event - route logging into the log panel and focus the view."""
        root_logger = logging.getLogger()
        self.original_handlers = root_logger.handlers[:]

        log_widget = self.query_one(Log)
        self.log_widget = log_widget
        tui_handler = TuiLogHandler(self, log_widget.write_lines)
        tui_handler.setFormatter(StreamFormatter("%(message)s"))

        root_logger.handlers = [tui_handler]
        root_logger.setLevel(logging.INFO)

        for boto_module in BOTO_LOGGERS:
            logging.getLogger(boto_module).setLevel(logging.WARNING)

        self.query_one(ConsoleView).focus()

    def on_unmount(self) -> None:
        """Handle unmount event - restore logging."""
        logging.getLogger().handlers = self.original_handlers

    async def on_tui_log_message(self, message: TuiLogMessage) -> None:
        """Append log messages emitted from worker threads to the log widget."""
        if self.log_widget is None:
            return

        self.log_widget.write_lines(message.lines)

    def handle_key(self, key: str, character: str | None = None) -> None:
        """Run one key press through the console model.

        Parameters
        ----------
        key : str
            Key name
        character : str | None
            Printable character for the key, if any
        """
        self.model, command = update(self.model, key, character)
        self.refresh_view()

        if isinstance(command, Quit):
            self.exit()
        elif isinstance(command, (SubmitBucket, SubmitInstance)):
            self.run_worker(
                partial(self._run_create, command),
                name="create-resource",
                thread=True,
                exit_on_error=False,
            )

    def _run_create(self, command: SubmitBucket | SubmitInstance) -> None:
        """Run a create action in a worker thread and post its result."""
        try:
            result = run_command(command, self.service_factory)
        except Exception as e:
            logger.exception("Unexpected error during create action")
            result = ResourceResult.failure(ErrorKind.CREATION, f"Unexpected error: {e}")

        self.post_message(ResultMessage(result))

    def on_result_message(self, message: ResultMessage) -> None:
        """Show a finished create action's result."""
        self.model = apply_result(self.model, message.result)
        self.refresh_view()

    def refresh_view(self) -> None:
        """Re-render the screen body from the current model."""
        try:
            self.query_one(ConsoleView).update(render(self.model))
        except Exception as e:
            logger.debug("Failed to update console view: %s", e)
