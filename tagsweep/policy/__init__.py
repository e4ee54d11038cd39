"""Pure decision logic for temporary tag retention."""

from .retention import (
    Verdict,
    decide,
    elapsed_minutes,
    find_release,
    is_candidate,
    should_delete_now,
    ttl_minutes,
)

__all__ = [
    "Verdict",
    "decide",
    "elapsed_minutes",
    "find_release",
    "is_candidate",
    "should_delete_now",
    "ttl_minutes",
]
