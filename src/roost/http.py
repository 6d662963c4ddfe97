"""Request and Redirect value types.

Roost does not speak a wire protocol; these are the plain values an
action receives and may return.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import parse_qsl


@dataclass(frozen=True, slots=True)
class Request:
    """An incoming request as seen by an action."""

    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_target(
        cls,
        method: str,
        target: str,
        headers: tuple[tuple[str, str], ...] = (),
    ) -> Request:
        """Build a request from a method and a request target.

        ``Request.from_target("GET", "/users?page=2")`` splits the query
        string off the path. Repeated query keys keep the last value.
        """
        path, _, query_string = target.partition("?")
        query = dict(parse_qsl(query_string, keep_blank_values=True))
        return cls(
            method=method.upper(),
            path=path or "/",
            query=MappingProxyType(query),
            headers=headers,
        )

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect response."""

    url: str
    status: int = 302
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def location(self) -> str:
        return self.url
