"""GitHub REST calls used by the cleanup.

Only the four endpoints the cleanup needs are wrapped here. Listings fetch
a single page of the requested size; later pages are never requested.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from urllib.parse import quote

from tagsweep.core.config import DEFAULT_API_URL
from tagsweep.core.errors import CleanupError
from tagsweep.core.result import Err, Ok, Result
from tagsweep.core.structured import as_obj_list, as_str_dict, get_int, get_str
from tagsweep.github.model import Release, Tag, parse_timestamp

if TYPE_CHECKING:
    from tagsweep.github.http import HttpClient, HttpError

__all__ = ["GitHubClient", "RepoApi", "tag_ref"]

TAG_REF_PREFIX = "refs/tags/"


def tag_ref(tag_name: str) -> str:
    """Full ref name for a tag, e.g. ``refs/tags/temp_1h``."""
    return f"{TAG_REF_PREFIX}{tag_name}"


class RepoApi(Protocol):
    """The repository operations the cleanup service consumes."""

    def list_tags(
        self, owner: str, repo: str, per_page: int
    ) -> Result[list[Tag], CleanupError]: ...

    def list_releases(
        self, owner: str, repo: str, per_page: int
    ) -> Result[list[Release], CleanupError]: ...

    def delete_release(
        self, owner: str, repo: str, release_id: int
    ) -> Result[None, CleanupError]: ...

    def delete_ref(self, owner: str, repo: str, ref: str) -> Result[None, CleanupError]: ...


def _api_failed(message: str, error: HttpError) -> CleanupError:
    return CleanupError(kind="api_failed", message=message, hint=str(error))


class GitHubClient:
    """RepoApi implementation over an injectable HttpClient."""

    def __init__(self, http: HttpClient, api_url: str = DEFAULT_API_URL) -> None:
        self._http = http
        self._api_url = api_url.rstrip("/")

    def _repo_url(self, owner: str, repo: str, path: str) -> str:
        return f"{self._api_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/{path}"

    def _get_list(self, url: str, what: str) -> Result[list[object], CleanupError]:
        def as_list(payload: object) -> Result[list[object], CleanupError]:
            raw = as_obj_list(payload)
            if raw is None:
                return Err(
                    CleanupError(
                        kind="invalid_payload",
                        message=f"unexpected {what} payload",
                        hint=url,
                    )
                )
            return Ok(raw)

        return (
            self._http.get_json(url)
            .map_err(lambda error: _api_failed(f"failed to list {what}", error))
            .flat_map(as_list)
        )

    def list_tags(self, owner: str, repo: str, per_page: int) -> Result[list[Tag], CleanupError]:
        raw = self._get_list(self._repo_url(owner, repo, f"tags?per_page={per_page}"), "tags")
        if isinstance(raw, Err):
            return raw

        out: list[Tag] = []
        for item in raw.value:
            d = as_str_dict(item)
            if d is None:
                continue
            name = get_str(d, "name")
            if name is None:
                continue
            out.append(Tag(name=name))
        return Ok(out)

    def list_releases(
        self, owner: str, repo: str, per_page: int
    ) -> Result[list[Release], CleanupError]:
        raw = self._get_list(
            self._repo_url(owner, repo, f"releases?per_page={per_page}"), "releases"
        )
        if isinstance(raw, Err):
            return raw

        out: list[Release] = []
        for item in raw.value:
            d = as_str_dict(item)
            if d is None:
                continue
            tag_name = get_str(d, "tag_name")
            if tag_name is None:
                continue

            # A release with a tag name but no usable id or timestamp is kept
            # so that it still binds its tag.
            created_raw = get_str(d, "created_at")
            out.append(
                Release(
                    id=get_int(d, "id"),
                    tag_name=tag_name,
                    created_at=parse_timestamp(created_raw) if created_raw else None,
                )
            )
        return Ok(out)

    def delete_release(self, owner: str, repo: str, release_id: int) -> Result[None, CleanupError]:
        url = self._repo_url(owner, repo, f"releases/{release_id}")
        return self._http.delete(url).map_err(
            lambda error: _api_failed(f"failed to delete release {release_id}", error)
        )

    def delete_ref(self, owner: str, repo: str, ref: str) -> Result[None, CleanupError]:
        # The git/refs endpoint takes the ref without its leading "refs/".
        path = ref.removeprefix("refs/")
        url = self._repo_url(owner, repo, f"git/refs/{quote(path, safe='/')}")
        return self._http.delete(url).map_err(
            lambda error: _api_failed(f"failed to delete ref {ref}", error)
        )
