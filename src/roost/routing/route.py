"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field
from typing import Any

from roost.routing.name import RouteName
from roost.routing.pattern import RoutePattern


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Binds a pattern to the action class that handles it. ``param_types``
    maps placeholder names to converter names (``"int"``) and narrows
    what the router will match; unlisted placeholders match any segment.
    """

    pattern: RoutePattern
    action: type[Any]
    name: RouteName | None = None
    param_types: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def method(self) -> str:
        return self.pattern.method

    @property
    def path(self) -> str:
        return self.pattern.path


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
