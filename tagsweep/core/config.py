"""Typed configuration loaded once from the process environment.

The environment is read a single time at startup into an immutable
CleanupConfig, which is then passed explicitly to the cleanup service.
Nothing else in the package reads os.environ.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import CleanupError
from .result import Err, Ok, Result

__all__ = [
    "CleanupConfig",
    "load_config",
    "DEFAULT_API_URL",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "ENV_TOKEN",
    "ENV_OWNER",
    "ENV_REPO",
    "ENV_REPOSITORY",
    "ENV_API_URL",
]

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_PER_PAGE = 100
# GitHub caps page size at 100; only one page is ever requested.
MAX_PER_PAGE = 100

ENV_TOKEN = "GITHUB_TOKEN"
ENV_OWNER = "REPO_OWNER"
ENV_REPO = "REPO_NAME"
ENV_REPOSITORY = "GITHUB_REPOSITORY"
ENV_API_URL = "GITHUB_API_URL"


@dataclass(frozen=True, slots=True)
class CleanupConfig:
    """Repository identity and run options for one cleanup run."""

    owner: str
    repo: str
    token: str = field(default="", repr=False)
    per_page: int = DEFAULT_PER_PAGE
    api_url: str = DEFAULT_API_URL
    dry_run: bool = False

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


def _env(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _repo_from_env(env: Mapping[str, str]) -> str | None:
    explicit = _env(env, ENV_REPO)
    if explicit is not None:
        return explicit

    combined = _env(env, ENV_REPOSITORY)
    if combined is None:
        return None
    parts = combined.split("/")
    if len(parts) < 2:
        return None
    return parts[1].strip() or None


def load_config(
    env: Mapping[str, str],
    *,
    per_page: int = DEFAULT_PER_PAGE,
    dry_run: bool = False,
) -> Result[CleanupConfig, CleanupError]:
    """Build a CleanupConfig from environment values.

    Args:
        env: Environment mapping (usually os.environ)
        per_page: Page size for the single tags/releases listing
        dry_run: Decide and report only, never delete

    Returns:
        Ok with the config, or Err when the repository cannot be identified
    """
    owner = _env(env, ENV_OWNER)
    if owner is None:
        return Err(
            CleanupError(
                kind="config_missing",
                message="repository owner is not set",
                hint=f"Set {ENV_OWNER}.",
            )
        )

    repo = _repo_from_env(env)
    if repo is None:
        return Err(
            CleanupError(
                kind="config_missing",
                message="repository name is not set",
                hint=f"Set {ENV_REPO}, or {ENV_REPOSITORY} as owner/repo.",
            )
        )

    if not 1 <= per_page <= MAX_PER_PAGE:
        return Err(
            CleanupError(
                kind="config_missing",
                message=f"invalid page size: {per_page}",
                hint=f"Use a value between 1 and {MAX_PER_PAGE}.",
            )
        )

    api_url = (_env(env, ENV_API_URL) or DEFAULT_API_URL).rstrip("/")

    return Ok(
        CleanupConfig(
            owner=owner,
            repo=repo,
            token=_env(env, ENV_TOKEN) or "",
            per_page=per_page,
            api_url=api_url,
            dry_run=dry_run,
        )
    )
