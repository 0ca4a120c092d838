"""Rich/JSON/quiet output selection.

The CLI renders ServiceResult for humans (Rich output), for machines
(``--json``), or as a bare value for shell pipelines (``--quiet``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from whenctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from whenctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When omitted, built from *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``;
            ignored when *settings* is given.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
