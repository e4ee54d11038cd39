"""Cleanup of temporary tags and their releases for one repository.

Tags and releases are listed once per run, then tags are processed one at
a time. For each tag the release delete (if any) finishes before the tag
delete is issued. The first failed call ends the run; deletions already
made stay made, and the next run recomputes everything from the listings.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from tagsweep.core.config import CleanupConfig
from tagsweep.core.errors import CleanupError
from tagsweep.core.result import Err, Ok, Result
from tagsweep.github.client import RepoApi, tag_ref
from tagsweep.github.model import Release
from tagsweep.output.console import ConsoleProtocol, Style
from tagsweep.policy.retention import decide, find_release, is_candidate

__all__ = ["CleanupReport", "CleanupService", "Clock", "utc_now"]

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class CleanupReport:
    tags_seen: int
    releases_seen: int
    deleted_releases: tuple[str, ...]
    deleted_tags: tuple[str, ...]
    skipped_tags: tuple[str, ...]
    dry_run: bool = False

    @property
    def deleted_anything(self) -> bool:
        return bool(self.deleted_releases or self.deleted_tags)


class CleanupService:
    """Applies the retention policy to every tag of one repository."""

    def __init__(
        self,
        *,
        config: CleanupConfig,
        api: RepoApi,
        console: ConsoleProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self._config = config
        self._api = api
        self._console = console
        self._clock = clock

    def run(self) -> Result[CleanupReport, CleanupError]:
        cfg = self._config
        console = self._console

        console.print(f"Starting cleanup for {cfg.slug}")
        if cfg.dry_run:
            console.print("dry run: no release or tag will be deleted", Style.DIM)

        tags = self._api.list_tags(cfg.owner, cfg.repo, cfg.per_page)
        if isinstance(tags, Err):
            return tags
        console.print(f"Found {len(tags.value)} tags to check")

        releases = self._api.list_releases(cfg.owner, cfg.repo, cfg.per_page)
        if isinstance(releases, Err):
            return releases
        console.print(f"Found {len(releases.value)} releases to check")

        if len(tags.value) >= cfg.per_page or len(releases.value) >= cfg.per_page:
            console.warning(
                f"a listing filled its page of {cfg.per_page}; later pages are not checked"
            )

        now = self._clock()
        deleted_releases: list[str] = []
        deleted_tags: list[str] = []
        skipped: list[str] = []

        for tag in tags.value:
            if not is_candidate(tag.name):
                continue

            release = find_release(tag.name, releases.value)
            if release is not None and not release.complete:
                console.warning(
                    f"release for {tag.name} has no readable id or creation time; keeping it"
                )
            verdict = decide(tag.name, release, now)

            if verdict.keep:
                console.print(
                    f"Skipping release {tag.name} as time condition not met", Style.DIM
                )
                skipped.append(tag.name)
                continue

            if verdict.delete_release and release is not None:
                deleted = self._delete_release(release)
                if isinstance(deleted, Err):
                    return deleted
                deleted_releases.append(release.tag_name)

            if verdict.delete_tag:
                deleted = self._delete_tag(tag.name)
                if isinstance(deleted, Err):
                    return deleted
                deleted_tags.append(tag.name)

        console.success("Cleanup completed successfully")
        return Ok(
            CleanupReport(
                tags_seen=len(tags.value),
                releases_seen=len(releases.value),
                deleted_releases=tuple(deleted_releases),
                deleted_tags=tuple(deleted_tags),
                skipped_tags=tuple(skipped),
                dry_run=cfg.dry_run,
            )
        )

    def _delete_release(self, release: Release) -> Result[None, CleanupError]:
        cfg = self._config
        if release.id is None:
            return Err(
                CleanupError(
                    kind="invalid_payload",
                    message=f"release for {release.tag_name} has no id",
                )
            )
        self._console.print(f"Deleting release: {release.tag_name}")
        if cfg.dry_run:
            return Ok(None)
        return self._api.delete_release(cfg.owner, cfg.repo, release.id)

    def _delete_tag(self, tag_name: str) -> Result[None, CleanupError]:
        cfg = self._config
        self._console.print(f"Deleting tag: {tag_name}")
        if cfg.dry_run:
            return Ok(None)
        return self._api.delete_ref(cfg.owner, cfg.repo, tag_ref(tag_name))
