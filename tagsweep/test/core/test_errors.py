from __future__ import annotations

import pytest

from tagsweep.core.errors import CleanupError, ErrorCode


def test_exit_code_values_are_stable() -> None:
    assert int(ErrorCode.OK) == 0
    assert int(ErrorCode.FAILURE) == 1


def test_cleanup_error_is_frozen() -> None:
    error = CleanupError(kind="api_failed", message="failed to list tags")
    assert error.hint is None
    with pytest.raises(AttributeError):
        error.message = "other"  # type: ignore[misc]
