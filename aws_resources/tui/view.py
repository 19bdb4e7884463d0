"""Rendering of the console model as Rich markup."""

from __future__ import annotations

from rich.markup import escape

from aws_resources.constants import FAILURE_GLYPH, SUCCESS_GLYPH
from aws_resources.tui.model import ConsoleModel, Screen
from aws_resources.utils import format_value

TITLES = {
    Screen.MAIN_MENU: "AWS Resources CLI",
    Screen.BUCKET_MENU: "S3 - Simple Storage Service",
    Screen.INSTANCE_MENU: "EC2 - Elastic Compute Cloud",
    Screen.BUCKET_FORM: "Create S3 Bucket",
    Screen.INSTANCE_FORM: "Create EC2 Instances",
    Screen.RESULT: "Result",
}

PROMPTS = {
    Screen.MAIN_MENU: "Choose a service to manage:",
    Screen.BUCKET_MENU: "Choose an action:",
    Screen.INSTANCE_MENU: "Choose an action:",
}

MENU_HELP = "Use ↑/↓ to navigate, Enter to select, Esc to go back, q to quit"
FORM_HELP = "Use Tab to switch fields, Enter on Edit Field to type, Enter again to confirm"
EDIT_HELP = "Editing: type to change the field, Enter or Esc to stop editing"
RESULT_HELP = "Press Esc or Enter to return to main menu"


def _title(text: str) -> str:
    return f"[bold reverse] {escape(text)} [/]"


def _choice_lines(model: ConsoleModel) -> list[str]:
    lines = []
    for index, choice in enumerate(model.choices):
        if index == model.cursor and not model.editing:
            lines.append(f"> [bold]{escape(choice)}[/bold]")
        else:
            lines.append(f"    {escape(choice)}")
    return lines


def _form_lines(model: ConsoleModel) -> list[str]:
    lines = []
    for index, (label, value) in enumerate(zip(model.form_fields, model.form_values)):
        shown = escape(value)
        if index == model.focus:
            if model.editing:
                shown += "_"
            lines.append(f"[bold]→ {escape(label)}:[/bold]")
        else:
            lines.append(f"  {escape(label)}:")
        lines.append(f"  │ {shown}")
        lines.append("")
    return lines


def _result_lines(model: ConsoleModel) -> list[str]:
    result = model.result
    if result is None:
        return ["No result to display"]

    if result.success:
        lines = [f"[bold green]{SUCCESS_GLYPH} Success![/]", "", escape(result.message), ""]
        if result.data:
            lines.append("Details:")
            for key, value in result.data.items():
                lines.append(f"  {escape(key)}: {escape(format_value(value))}")
        return lines

    lines = [f"[bold red]{FAILURE_GLYPH} Error![/]", "", escape(result.message)]
    if result.error:
        lines.append(f"Error Code: {escape(result.error)}")
    return lines


def render(model: ConsoleModel) -> str:
    """Render the model as Rich markup.

    Parameters
    ----------
    model : ConsoleModel
        State to render

    Returns
    -------
    str
        Markup for the whole screen
    """
    lines = [_title(TITLES[model.screen]), ""]

    if model.screen in PROMPTS:
        lines.extend([PROMPTS[model.screen], ""])

    if model.screen == Screen.RESULT:
        lines.extend(_result_lines(model))
        lines.append("")
        help_text = RESULT_HELP
    elif model.form_fields:
        lines.extend(_form_lines(model))
        help_text = EDIT_HELP if model.editing else FORM_HELP
    else:
        help_text = MENU_HELP

    if model.screen != Screen.RESULT:
        lines.extend(_choice_lines(model))
        lines.append("")

    if model.pending:
        lines.extend(["[italic]Working...[/italic]", ""])

    lines.append(f"[dim]{escape(help_text)}[/dim]")
    return "\n".join(lines)
