"""Shared helpers for the CLI boundary."""

from __future__ import annotations

from typing import TypeVar

import typer

from tagsweep.core.errors import ErrorCode
from tagsweep.core.result import Err, Result
from tagsweep.output.console import ConsoleProtocol, Style

T = TypeVar("T")
E = TypeVar("E")


def exit_on_error[T, E](
    result: Result[T, E],
    console: ConsoleProtocol,
    error_code: ErrorCode = ErrorCode.FAILURE,
) -> T:
    """Return the Ok value, or print the error and exit.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        console.error(message)
        if hint:
            console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))
    return result.value
