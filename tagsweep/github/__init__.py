"""GitHub REST access: transport, payload models and repository calls."""

from .client import GitHubClient, RepoApi, tag_ref
from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .model import Release, Tag

__all__ = [
    "GitHubClient",
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "Release",
    "RepoApi",
    "Tag",
    "tag_ref",
]
