"""RoutePattern — an HTTP method plus a path template — and path building.

Templates use ``:name`` for a single-segment placeholder and ``*name`` for
a glob that consumes the rest of the path::

    /projects/:project_id/users/:id
    /files/*path
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode

from roost.errors import (
    ConfigurationError,
    MissingRouteParam,
    RouteParamError,
    TooManyRouteParams,
)

METHODS: frozenset[str] = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``users``  (is_param=False)
    Param:   ``:id``    (is_param=True, param_name="id")
    Glob:    ``*path``  (is_param=True, param_name="path", is_glob=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    is_glob: bool = False


def normalize_path(path: str) -> str:
    """Collapse empty segments and force a single leading slash.

    ``"users/"`` -> ``"/users"``, ``""`` -> ``"/"``.
    """
    parts = [p for p in path.split("/") if p]
    return "/" + "/".join(parts)


def join_paths(*paths: str) -> str:
    """Join path fragments with single slashes."""
    return normalize_path("/".join(paths))


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path template into segments.

    Examples::

        "/users"             -> [PathSegment("users")]
        "/users/:id"         -> [PathSegment("users"), PathSegment(":id", is_param=True, ...)]
        "/files/*path"       -> [PathSegment("files"), PathSegment("*path", ..., is_glob=True)]

    Raises ``ConfigurationError`` for ``{param}`` or ``<param>`` style
    placeholders, for a glob that is not the last segment, and for a
    placeholder name used twice.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    parts = [p for p in path.strip("/").split("/") if p]
    for index, part in enumerate(parts):
        if (part.startswith("{") and part.endswith("}")) or (
            part.startswith("<") and part.endswith(">")
        ):
            msg = (
                f"Route path {path!r} uses {{param}} or <param> placeholders. "
                f"Roost expects :param (or *param for a glob)."
            )
            raise ConfigurationError(msg)
        if part[0] in ":*":
            name = part[1:]
            if not name.isidentifier():
                msg = f"Invalid placeholder {part!r} in route path {path!r}"
                raise ConfigurationError(msg)
            if name in seen:
                msg = f"Placeholder {name!r} appears twice in route path {path!r}"
                raise ConfigurationError(msg)
            is_glob = part[0] == "*"
            if is_glob and index != len(parts) - 1:
                msg = f"Glob {part!r} must be the last segment of route path {path!r}"
                raise ConfigurationError(msg)
            seen.add(name)
            segments.append(PathSegment(value=part, is_param=True, param_name=name, is_glob=is_glob))
        else:
            segments.append(PathSegment(value=part))
    return segments


@dataclass(frozen=True, slots=True)
class RouteHelper:
    """A structured (method, path) pair for one concrete request target."""

    method: str
    path: str

    def url(self, base_url: str) -> str:
        """Return the absolute URL of this target under *base_url*."""
        return base_url.rstrip("/") + self.path

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """An HTTP method and a path template.

    Usage::

        pattern = RoutePattern("GET", "/projects/:project_id/users/:id")
        pattern.param_names          # ("project_id", "id")
        pattern.build(7, 42)         # "/projects/7/users/42"
        pattern.helper(7, 42, page=2)
        # RouteHelper(method="GET", path="/projects/7/users/42?page=2")
    """

    method: str
    path: str
    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in METHODS:
            msg = f"Unsupported HTTP method {self.method!r} for route path {self.path!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "path", normalize_path(self.path))
        object.__setattr__(self, "segments", tuple(parse_path(self.path)))

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self.segments if s.param_name is not None)

    def prefixed(self, prefix: str) -> RoutePattern:
        """Return a copy of this pattern mounted under *prefix*."""
        if not prefix.strip("/"):
            return self
        return RoutePattern(self.method, join_paths(prefix, self.path))

    def build(self, *values: Any, anchor: str | None = None, **query: Any) -> str:
        """Fill the placeholders and return a path string.

        Positional *values* fill placeholders left to right. Keywords named
        after a remaining placeholder fill it; every other keyword becomes
        part of the query string (``None`` values are dropped).

        Raises ``TooManyRouteParams`` for surplus positional values and
        ``MissingRouteParam`` when a placeholder is left without a value.
        """
        names = self.param_names
        if len(values) > len(names):
            msg = (
                f"{self.path!r} takes {len(names)} path value(s) "
                f"but {len(values)} were given"
            )
            raise TooManyRouteParams(msg)

        filled: dict[str, Any] = dict(zip(names, values, strict=False))
        for name in names:
            if name in query:
                if name in filled:
                    msg = f"Got multiple values for {name!r} in {self.path!r}"
                    raise RouteParamError(msg)
                filled[name] = query.pop(name)

        parts: list[str] = []
        for seg in self.segments:
            if seg.param_name is None:
                parts.append(seg.value)
                continue
            value = filled.get(seg.param_name)
            if value is None or str(value) == "":
                msg = f"Missing value for {seg.param_name!r} in {self.path!r}"
                raise MissingRouteParam(msg)
            parts.append(quote(str(value), safe="/" if seg.is_glob else ""))

        path = "/" + "/".join(parts)
        params = {k: v for k, v in query.items() if v is not None}
        if params:
            path = f"{path}?{urlencode(params, doseq=True)}"
        if anchor:
            path = f"{path}#{quote(anchor)}"
        return path

    def helper(self, *values: Any, anchor: str | None = None, **query: Any) -> RouteHelper:
        """Build the path and pair it with this pattern's method."""
        return RouteHelper(method=self.method, path=self.build(*values, anchor=anchor, **query))

    def __str__(self) -> str:
        return f"{self.method} {self.path}"
