from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class Tag:
    name: str


@dataclass(frozen=True, slots=True)
class Release:
    """A release bound to a tag by exact name.

    id and created_at are None when the listing carried the release's tag
    name but no usable value for them. Such a release still blocks its
    tag from being deleted on its own.
    """

    id: int | None
    tag_name: str
    created_at: datetime | None

    @property
    def complete(self) -> bool:
        return self.id is not None and self.created_at is not None


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 API timestamp into an aware UTC datetime.

    Naive values are taken as UTC. Returns None when the value is malformed.
    """
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
