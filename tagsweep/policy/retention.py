"""Retention policy for temporary tags.

A tag is temporary when its name starts with ``temp_`` or ``tmp_``. The
rest of the name may encode a time-to-live:

    temp_3h, tmp_1hs      whole hours, 1 to 9
    temp_25m, tmp_10m     minutes, multiples of 5 from 10 to 55

The TTL is measured from the creation time of the release bound to the
tag. A temporary tag whose name carries no recognised TTL (``temp_foo``,
``tmp_12h``, ``tmp_1h30m``) is disposable right away.

Everything here is pure: no I/O, and the current time is always passed in.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from tagsweep.github.model import Release

__all__ = [
    "CANDIDATE_PREFIXES",
    "TTL_RULES",
    "TtlRule",
    "Verdict",
    "decide",
    "elapsed_minutes",
    "find_release",
    "is_candidate",
    "should_delete_now",
    "ttl_minutes",
]

CANDIDATE_PREFIXES = ("temp_", "tmp_")


@dataclass(frozen=True, slots=True)
class TtlRule:
    """A tag-name pattern and how to turn its capture into minutes."""

    name: str
    pattern: re.Pattern[str]
    to_minutes: Callable[[int], int]

    def match(self, tag_name: str) -> int | None:
        m = self.pattern.fullmatch(tag_name)
        if m is None:
            return None
        return self.to_minutes(int(m.group(1)))


# Evaluated in order; the first match wins.
TTL_RULES: tuple[TtlRule, ...] = (
    TtlRule(
        name="hours",
        pattern=re.compile(r"(?:temp|tmp)_([1-9])hs?"),
        to_minutes=lambda hours: hours * 60,
    ),
    TtlRule(
        name="minutes",
        pattern=re.compile(r"(?:temp|tmp)_(10|15|20|25|30|35|40|45|50|55)m"),
        to_minutes=lambda minutes: minutes,
    ),
)


@dataclass(frozen=True, slots=True)
class Verdict:
    delete_release: bool
    delete_tag: bool

    @property
    def keep(self) -> bool:
        return not self.delete_release and not self.delete_tag


KEEP = Verdict(delete_release=False, delete_tag=False)
DELETE_TAG_ONLY = Verdict(delete_release=False, delete_tag=True)
DELETE_BOTH = Verdict(delete_release=True, delete_tag=True)


def is_candidate(tag_name: str) -> bool:
    """True when the tag follows the temporary naming convention."""
    return tag_name.startswith(CANDIDATE_PREFIXES)


def ttl_minutes(tag_name: str) -> int | None:
    """TTL encoded in the tag name, or None when no rule matches."""
    for rule in TTL_RULES:
        minutes = rule.match(tag_name)
        if minutes is not None:
            return minutes
    return None


def elapsed_minutes(created_at: datetime, now: datetime) -> int:
    """Whole minutes from created_at to now, truncated toward zero."""
    return math.trunc((now - created_at).total_seconds() / 60)


def should_delete_now(tag_name: str, release_created_at: datetime, now: datetime) -> bool:
    """Whether the release bound to a temporary tag has outlived its TTL.

    Names without a recognised TTL always return True.
    """
    ttl = ttl_minutes(tag_name)
    if ttl is None:
        return True
    return elapsed_minutes(release_created_at, now) >= ttl


def decide(tag_name: str, release: Release | None, now: datetime) -> Verdict:
    """Decide what to delete for one tag.

    A release is only ever deleted together with its tag, so a kept release
    also keeps its tag until a later run. A release whose id or creation
    time could not be read is always kept, and so is its tag.
    """
    if not is_candidate(tag_name):
        return KEEP
    if release is None:
        return DELETE_TAG_ONLY
    if release.id is None or release.created_at is None:
        return KEEP
    if should_delete_now(tag_name, release.created_at, now):
        return DELETE_BOTH
    return KEEP


def find_release(tag_name: str, releases: Iterable[Release]) -> Release | None:
    """First release whose tag name equals tag_name exactly."""
    return next((r for r in releases if r.tag_name == tag_name), None)
