"""Result formatting for the command line."""

from __future__ import annotations

import json

from aws_resources.constants import FAILURE_GLYPH, SUCCESS_GLYPH
from aws_resources.core.result import ResourceResult


def format_result(result: ResourceResult, verbose: bool = False) -> str:
    """Format a result for printing.

    Parameters
    ----------
    result : ResourceResult
        Result to format
    verbose : bool
        Dump every field as indented JSON instead of the short form

    Returns
    -------
    str
        Indented JSON in verbose mode; otherwise one glyph-prefixed line,
        plus an ``Error:`` line for failures with a known kind
    """
    if verbose:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False, default=str)

    if result.success:
        return f"{SUCCESS_GLYPH} {result.message}"

    lines = [f"{FAILURE_GLYPH} {result.message}"]
    if result.error:
        lines.append(f"   Error: {result.error}")

    return "\n".join(lines)
