"""Console state machine.

The console model is an immutable value. ``update`` maps a model and a key
press to a new model plus an optional command for the app to carry out, and
``apply_result`` folds a finished create action back in. Nothing here touches
the terminal or AWS, so key sequences replay deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from aws_resources.constants import DEFAULT_INSTANCE_COUNT, DEFAULT_REGION
from aws_resources.core.result import ResourceResult


class Screen(str, Enum):
    """Console screens."""

    MAIN_MENU = "main_menu"
    BUCKET_MENU = "bucket_menu"
    INSTANCE_MENU = "instance_menu"
    BUCKET_FORM = "bucket_form"
    INSTANCE_FORM = "instance_form"
    RESULT = "result"


CHOICES: dict[Screen, tuple[str, ...]] = {
    Screen.MAIN_MENU: (
        "Buckets - Manage S3 Buckets",
        "Instances - Manage EC2 Instances",
        "Exit",
    ),
    Screen.BUCKET_MENU: ("Create Bucket", "Back to Main Menu"),
    Screen.INSTANCE_MENU: ("Launch Instances", "Back to Main Menu"),
    Screen.BUCKET_FORM: ("Edit Field", "Create Bucket", "Back to Bucket Menu"),
    Screen.INSTANCE_FORM: ("Edit Field", "Launch Instances", "Back to Instance Menu"),
    Screen.RESULT: ("Back to Main Menu",),
}

BUCKET_FIELDS = ("Bucket Name", "Region")
INSTANCE_FIELDS = ("Image ID (AMI)", "Instance Type", "Key Name", "Count", "Region")

PARENTS: dict[Screen, Screen] = {
    Screen.BUCKET_MENU: Screen.MAIN_MENU,
    Screen.INSTANCE_MENU: Screen.MAIN_MENU,
    Screen.BUCKET_FORM: Screen.BUCKET_MENU,
    Screen.INSTANCE_FORM: Screen.INSTANCE_MENU,
    Screen.RESULT: Screen.MAIN_MENU,
}

FORM_EDIT, FORM_SUBMIT, FORM_BACK = 0, 1, 2

UP_KEYS = frozenset(("up", "k"))
DOWN_KEYS = frozenset(("down", "j"))


@dataclass(frozen=True)
class SubmitBucket:
    """Request to create a bucket from the bucket form."""

    bucket_name: str
    region: str


@dataclass(frozen=True)
class SubmitInstance:
    """Request to launch instances from the instance form."""

    image_id: str
    instance_type: str
    key_name: str
    count: str
    region: str


@dataclass(frozen=True)
class Quit:
    """Request to leave the console."""


Command = SubmitBucket | SubmitInstance | Quit


@dataclass(frozen=True)
class ConsoleModel:
    """Complete console state.

    Attributes
    ----------
    screen : Screen
        Current screen
    cursor : int
        Selected entry in the screen's choice list
    focus : int
        Form field receiving character input while editing
    editing : bool
        Whether character keys go into the focused field
    bucket_form : tuple[str, ...]
        Bucket form buffers, ordered as BUCKET_FIELDS
    instance_form : tuple[str, ...]
        Instance form buffers, ordered as INSTANCE_FIELDS
    result : ResourceResult | None
        Outcome of the last create action
    pending : bool
        Whether a create action is running
    """

    screen: Screen = Screen.MAIN_MENU
    cursor: int = 0
    focus: int = 0
    editing: bool = False
    bucket_form: tuple[str, ...] = ("", DEFAULT_REGION)
    instance_form: tuple[str, ...] = (
        "",
        "",
        "",
        str(DEFAULT_INSTANCE_COUNT),
        DEFAULT_REGION,
    )
    result: ResourceResult | None = None
    pending: bool = False

    @property
    def choices(self) -> tuple[str, ...]:
        return CHOICES[self.screen]

    @property
    def form_fields(self) -> tuple[str, ...]:
        """Field labels of the current form, empty outside form screens."""
        if self.screen == Screen.BUCKET_FORM:
            return BUCKET_FIELDS
        if self.screen == Screen.INSTANCE_FORM:
            return INSTANCE_FIELDS
        return ()

    @property
    def form_values(self) -> tuple[str, ...]:
        if self.screen == Screen.BUCKET_FORM:
            return self.bucket_form
        if self.screen == Screen.INSTANCE_FORM:
            return self.instance_form
        return ()


def initial_model(default_region: str = DEFAULT_REGION) -> ConsoleModel:
    """Build the starting model with ``default_region`` in both forms."""
    return ConsoleModel(
        bucket_form=("", default_region),
        instance_form=("", "", "", str(DEFAULT_INSTANCE_COUNT), default_region),
    )


def _go(model: ConsoleModel, screen: Screen) -> ConsoleModel:
    return replace(model, screen=screen, cursor=0, focus=0, editing=False)


def _edit_focused(model: ConsoleModel, edit: str, text: str = "") -> ConsoleModel:
    values = list(model.form_values)
    current = values[model.focus]
    values[model.focus] = current[:-1] if edit == "backspace" else current + text

    if model.screen == Screen.BUCKET_FORM:
        return replace(model, bucket_form=tuple(values))
    return replace(model, instance_form=tuple(values))


def _submit(model: ConsoleModel) -> tuple[ConsoleModel, Command | None]:
    if model.pending:
        return model, None

    if model.screen == Screen.BUCKET_FORM:
        bucket_name, region = model.bucket_form
        command: Command = SubmitBucket(bucket_name=bucket_name, region=region)
    else:
        image_id, instance_type, key_name, count, region = model.instance_form
        command = SubmitInstance(
            image_id=image_id,
            instance_type=instance_type,
            key_name=key_name,
            count=count,
            region=region,
        )

    return replace(model, pending=True), command


def _activate(model: ConsoleModel) -> tuple[ConsoleModel, Command | None]:
    screen, cursor = model.screen, model.cursor

    if screen == Screen.MAIN_MENU:
        if cursor == 0:
            return _go(model, Screen.BUCKET_MENU), None
        if cursor == 1:
            return _go(model, Screen.INSTANCE_MENU), None
        return model, Quit()

    if screen == Screen.BUCKET_MENU:
        target = Screen.BUCKET_FORM if cursor == 0 else Screen.MAIN_MENU
        return _go(model, target), None

    if screen == Screen.INSTANCE_MENU:
        target = Screen.INSTANCE_FORM if cursor == 0 else Screen.MAIN_MENU
        return _go(model, target), None

    if screen in (Screen.BUCKET_FORM, Screen.INSTANCE_FORM):
        if cursor == FORM_EDIT:
            return replace(model, editing=True), None
        if cursor == FORM_SUBMIT:
            return _submit(model)
        return _go(model, PARENTS[screen]), None

    return _go(model, Screen.MAIN_MENU), None


def _back(model: ConsoleModel) -> ConsoleModel:
    if model.editing:
        return replace(model, editing=False)

    parent = PARENTS.get(model.screen)
    if parent is None:
        return model

    return _go(model, parent)


def update(
    model: ConsoleModel, key: str, character: str | None = None
) -> tuple[ConsoleModel, Command | None]:
    """Apply one key press.

    Parameters
    ----------
    model : ConsoleModel
        Current state
    key : str
        Key name as reported by Textual (e.g. "up", "enter", "tab", "a")
    character : str | None
        Printable character for the key, if any

    Returns
    -------
    tuple[ConsoleModel, Command | None]
        New state and the command the app should run, if any
    """
    if key == "ctrl+c":
        return model, Quit()

    if model.editing:
        if key == "enter":
            return replace(model, editing=False), None
        if key == "escape":
            return _back(model), None
        if key == "tab":
            return replace(model, focus=(model.focus + 1) % len(model.form_fields)), None
        if key == "backspace":
            return _edit_focused(model, "backspace"), None
        if character and len(character) == 1 and character.isprintable():
            return _edit_focused(model, "append", character), None
        return model, None

    if key == "q":
        return model, Quit()

    if key in UP_KEYS:
        return replace(model, cursor=(model.cursor - 1) % len(model.choices)), None

    if key in DOWN_KEYS:
        return replace(model, cursor=(model.cursor + 1) % len(model.choices)), None

    if key == "tab" and model.form_fields:
        return replace(model, focus=(model.focus + 1) % len(model.form_fields)), None

    if key == "enter":
        return _activate(model)

    if key == "escape":
        return _back(model), None

    return model, None


def apply_result(model: ConsoleModel, result: ResourceResult) -> ConsoleModel:
    """Show a finished create action's result."""
    return replace(
        model,
        screen=Screen.RESULT,
        cursor=0,
        focus=0,
        editing=False,
        result=result,
        pending=False,
    )
