"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def display_format_from(ctx: typer.Context) -> str:
    """Get the display format stored on the root context by the main callback."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
        return obj["display_format"]
    return "text"


def _handle_stage_result(
    func: F, text_printer: Callable[[dict], Any] | None = None, display_format: str = "text"
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout): ``text_printer`` lines in text mode, otherwise JSON or YAML
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from notelinks.cli.display import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format, text_printer)

    return wrapper  # type: ignore[return-value]
