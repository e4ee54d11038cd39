"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for the two HTTP operations the cleanup needs
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import http.client
import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from tagsweep import __version__
from tagsweep.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]

GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Lets tests inject an in-memory client instead of touching the network.
    """

    def get_json(self, url: str) -> Result[object, HttpError]:
        """Fetch URL and parse the body as JSON."""
        ...

    def delete(self, url: str) -> Result[None, HttpError]:
        """Issue a DELETE request and discard the body."""
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Every request is a single blocking call. No retry is attempted and no
    timeout is applied unless one is passed in.
    """

    def __init__(
        self,
        token: str = "",
        timeout: float | None = None,
        user_agent: str = f"tagsweep/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._token = token
        self._ssl_context = ssl.create_default_context()

    def headers(self) -> dict[str, str]:
        """Request headers; Authorization is only sent when a token is set."""
        headers = {
            "User-Agent": self.user_agent,
            "Accept": GITHUB_ACCEPT,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _request(self, url: str, method: str) -> Result[bytes, HttpError]:
        try:
            req = urllib.request.Request(url, headers=self.headers(), method=method)
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except http.client.HTTPException as e:
            # Connection dropped or body cut short after the status line.
            return Err(HttpError(url=url, status=0, message=str(e) or type(e).__name__))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

    def get_json(self, url: str) -> Result[object, HttpError]:
        result = self._request(url, "GET")
        if isinstance(result, Err):
            return result

        try:
            data: object = json.loads(result.value.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))
        return Ok(data)

    def delete(self, url: str) -> Result[None, HttpError]:
        result = self._request(url, "DELETE")
        if isinstance(result, Err):
            return result
        return Ok(None)


class MockHttpClient:
    """Mock HTTP client for testing.

    GET responses are set per URL. DELETE succeeds by default unless an
    error is registered for the URL. Every call is recorded in order.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.github.com/repos/o/r/tags?per_page=100", [])
        client.set_delete("https://api.github.com/repos/o/r/releases/1", HttpError(...))
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, object | HttpError] = {}
        self._delete_errors: dict[str, HttpError] = {}
        self.calls: list[tuple[str, str]] = []

    def set_json(self, url: str, response: object | HttpError) -> None:
        self._json_responses[url] = response

    def set_delete(self, url: str, error: HttpError) -> None:
        self._delete_errors[url] = error

    def get_json(self, url: str) -> Result[object, HttpError]:
        self.calls.append(("GET", url))

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    def delete(self, url: str) -> Result[None, HttpError]:
        self.calls.append(("DELETE", url))

        error = self._delete_errors.get(url)
        if error is not None:
            return Err(error)
        return Ok(None)
