"""Result type for explicit error handling.

Remote calls and configuration loading return a Result instead of raising,
so the cleanup loop can stop on the first failure and hand it back to the
CLI, which is the only place that turns an error into an exit code.

Usage:
    def find_owner(env: Mapping[str, str]) -> Result[str, str]:
        owner = env.get("REPO_OWNER")
        if not owner:
            return Err("REPO_OWNER is not set")
        return Ok(owner)

    match find_owner(os.environ):
        case Ok(owner):
            print(f"owner: {owner}")
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result carrying a value."""

    value: T

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible step onto the value."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying an error."""

    error: E

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
