"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any, TypeVar

from notelinks.api.validate_output import validate_output

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    text_printer: Callable[[dict], Any] | None = None,
) -> None:
    """Run command once and display result.

    Commands must handle all expected failures internally and report them
    through their output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.progress(message, progress_percent)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    result.output = validate_output(func, result.output)

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if display_format == "text" and text_printer is not None:
        display.text_output(text_printer(result.output))
    elif display_format == "text":
        display.json_output(result.output, format="yaml")
    else:
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
