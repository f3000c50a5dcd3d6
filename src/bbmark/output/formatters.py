"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables, colors) or
machines (--json). Text-producing operations (render, strip, excerpt)
print their output verbatim in human mode so the CLI can sit in a pipe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from bbmark.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from bbmark.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a ServiceResult should be presented."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Shortcut for ``OutputSettings(json_output=True)``;
            ignored when *settings* is given.
        settings: Full output settings.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
