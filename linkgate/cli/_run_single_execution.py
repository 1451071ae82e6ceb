"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    quiet: bool = False,
) -> None:
    """Run command once, display the result and exit with its status.

    In quiet mode a successful run prints nothing; a failed run always prints
    the result line and the structured output to stderr.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not quiet:
        display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if not quiet:
            timestamp = datetime.now().strftime("%H:%M:%S")
            display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3 and 4: Result and Output
    if result.success:
        if not quiet:
            display.success(result.result)
            display.json_output(result.output, format=display_format)
    else:
        display.error(result.result)
        display.json_output(result.output, format=display_format, err=True)

    sys.exit(0 if result.success else 1)
