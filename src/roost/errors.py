"""Roost exception hierarchy.

Shared across the resolver, Router, App, and actions so every module
raises and catches the same types. Errors raised while a route is being
declared are ``ConfigurationError`` subclasses; errors raised while a
request is being handled are ``HTTPError`` subclasses.
"""

from dataclasses import dataclass


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when a route or app declaration is invalid.

    Typically raised by the ``class`` statement of an action or by
    ``App.mount()``, before any request can be routed.
    """


class InvalidRouteName(ConfigurationError):
    """A route name is empty, malformed, or too short for the requested mode."""


class UnrecognizedActionKind(ConfigurationError):
    """The terminal tag of a route name is not one of the seven action kinds."""

    def __init__(self, tag: str) -> None:
        from roost.routing.kinds import ActionKind

        self.tag = tag
        known = ", ".join(kind.value for kind in ActionKind)
        super().__init__(f"Unrecognized action kind {tag!r}. Expected one of: {known}")


class DuplicateRoute(ConfigurationError):
    """Two actions claim the same method and path."""


class RouteParamError(RoostError):
    """Base for errors raised while building a path from a pattern."""


class MissingRouteParam(RouteParamError):
    """A placeholder in the pattern has no value."""


class TooManyRouteParams(RouteParamError):
    """More positional values were given than the pattern has placeholders."""


@dataclass(frozen=True, slots=True)
class HTTPError(RoostError):
    """An error that maps directly to an HTTP status code.

    Raised by the router and by typed path accessors while a request is
    being dispatched.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — a path parameter could not be converted to its declared type."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods and embeds
    the allowed methods in the detail string for developer visibility.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
