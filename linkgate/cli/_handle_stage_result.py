"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_options(ctx: typer.Context | None) -> tuple[str, bool]:
    """Get display format and verbosity from the Typer context chain."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            return obj["display_format"], bool(obj.get("verbose", False))
        current = current.parent
    return "yaml", False


def _handle_stage_result(func: F, ctx: typer.Context | None = None, quiet: bool = False) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    Args:
        func: Function that returns StageResult
        ctx: Context of the invoking command; its chain holds ``--display`` and ``--verbose``
        quiet: Print nothing on success unless ``--verbose`` was given

    Returns:
        Wrapped function that displays the result and exits with the appropriate code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display_format, verbose = _extract_options(ctx)
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format, quiet=quiet and not verbose)

    return wrapper  # type: ignore[return-value]
