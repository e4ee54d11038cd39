"""Exit codes and the error type shared by config, API and cleanup steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

__all__ = ["CleanupError", "CleanupErrorKind", "ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    A run either completes (0) or fails (1). There is no partial-success
    code: a failure after some deletions exits the same way as a failure
    before any.
    """

    OK = 0
    FAILURE = 1


CleanupErrorKind = Literal[
    "config_missing",
    "api_failed",
    "invalid_payload",
]


@dataclass(frozen=True, slots=True)
class CleanupError:
    kind: CleanupErrorKind
    message: str
    hint: str | None = None
