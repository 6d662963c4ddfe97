"""Compiled router with trie-based path matching.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

from roost.errors import ConfigurationError, DuplicateRoute, MethodNotAllowed, NotFound
from roost.routing.params import CONVERTERS
from roost.routing.route import Route, RouteMatch

logger = logging.getLogger("roost.routing")


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all_route", "children", "param_children", "routes_by_method")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Parameter children, most specific converter first
        self.param_children: list[_ParamEdge] = []
        # Catch-all route (glob placeholder)
        self.catch_all_route: _CatchAllEdge | None = None
        # Routes at this node, keyed by HTTP method
        self.routes_by_method: dict[str, Route] = {}


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (glob) edge — consumes remaining path."""

    param_name: str
    route_by_method: dict[str, Route]


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(Route(RoutePattern("GET", "/users"), Users.Index))
        router.add(Route(RoutePattern("GET", "/users/:id"), Users.Show, param_types={"id": "int"}))
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_by_action", "_compiled", "_root", "_shapes", "strict_slashes")

    def __init__(self, *, strict_slashes: bool = False) -> None:
        self._root = _TrieNode()
        self._compiled = False
        self._shapes: dict[tuple[str, tuple[str, ...]], Route] = {}
        self._by_action: dict[type[Any], Route] = {}
        self.strict_slashes = strict_slashes

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile().

        Raises ``DuplicateRoute`` when another route already answers the
        same method on a path of the same shape.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        shape = self._shape(route)
        existing = self._shapes.get((route.method, shape))
        if existing is not None:
            msg = (
                f"{route.method} {route.path} ({_action_name(route.action)}) conflicts with "
                f"{existing.method} {existing.path} ({_action_name(existing.action)})"
            )
            raise DuplicateRoute(msg)
        self._shapes[(route.method, shape)] = route
        self._by_action[route.action] = route

        node = self._root
        for seg in route.pattern.segments:
            if seg.is_glob:
                # Catch-all: consumes rest of path, must be last segment
                name = seg.param_name or "path"
                if node.catch_all_route is None:
                    node.catch_all_route = _CatchAllEdge(param_name=name, route_by_method={})
                elif node.catch_all_route.param_name != name:
                    msg = (
                        f"Glob *{name} in {route.path!r} conflicts with "
                        f"*{node.catch_all_route.param_name} at the same position"
                    )
                    raise ConfigurationError(msg)
                node.catch_all_route.route_by_method[route.method] = route
                logger.debug("Added route %s -> %s", route.pattern, _action_name(route.action))
                return

            if seg.is_param:
                node = self._param_node(node, seg.param_name or "", route.param_types)
            else:
                # Static segment
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        # Register method at the terminal node
        node.routes_by_method[route.method] = route
        logger.debug("Added route %s -> %s", route.pattern, _action_name(route.action))

    @staticmethod
    def _shape(route: Route) -> tuple[str, ...]:
        """Path shape with placeholder names erased, types kept."""
        shape: list[str] = []
        for seg in route.pattern.segments:
            if seg.is_glob:
                shape.append("*")
            elif seg.is_param:
                shape.append(":" + route.param_types.get(seg.param_name or "", "str"))
            else:
                shape.append(seg.value)
        return tuple(shape)

    @staticmethod
    def _param_node(node: _TrieNode, name: str, param_types: dict[str, str]) -> _TrieNode:
        param_type = param_types.get(name, "str")
        if param_type not in CONVERTERS or param_type == "path":
            msg = f"Unknown converter {param_type!r} for placeholder {name!r}"
            raise ConfigurationError(msg)
        for edge in node.param_children:
            if edge.param_name == name and edge.param_type == param_type:
                return edge.node
        pattern, _ = CONVERTERS[param_type]
        edge = _ParamEdge(
            param_name=name,
            param_type=param_type,
            regex=re.compile(f"^{pattern}$"),
            node=_TrieNode(),
        )
        node.param_children.append(edge)
        # "str" matches everything, so it is tried last
        node.param_children.sort(key=lambda e: e.param_type == "str")
        return edge.node

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order.

        Useful for introspection and route listings.
        """
        return list(self._shapes.values())

    def find(self, action: type[Any]) -> Route | None:
        """Return the route registered for *action*, if any."""
        return self._by_action.get(action)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Returns a ``RouteMatch`` on success. Static segments are compared
        and captured values stored percent-decoded, so a path built by
        ``RoutePattern.build`` dispatches back to the values it was built from.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if some route matches the path but none
        of them answers the method; ``Allow`` lists every method that does.
        ``HEAD`` falls back to the ``GET`` route of the same path.
        """
        method = method.upper()
        path = path.split("?", 1)[0]
        if self.strict_slashes and path != "/" and path.endswith("/"):
            raise NotFound(f"No route matches {method} {path!r}")

        parts = [p for p in path.strip("/").split("/") if p]
        allowed: set[str] = set()
        result = self._match_node(self._root, parts, 0, {}, method, allowed)

        if result is not None:
            route, params = result
            return RouteMatch(route=route, path_params=params)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))

        raise NotFound(f"No route matches {method} {path!r}")

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
        method: str,
        allowed: set[str],
    ) -> tuple[Route, dict[str, str]] | None:
        """Recursively match path parts against the trie.

        Backtracks past nodes that match the path but not the method,
        collecting their methods into *allowed*.
        """
        # All parts consumed
        if index == len(parts):
            return self._answer(node.routes_by_method, method, params, allowed)

        part = parts[index]
        decoded = unquote(part)

        # 1. Try static child first (exact match)
        if decoded in node.children:
            child = node.children[decoded]
            result = self._match_node(child, parts, index + 1, params, method, allowed)
            if result is not None:
                return result

        # 2. Try parameter children
        for edge in node.param_children:
            if edge.regex.match(part):
                new_params = {**params, edge.param_name: decoded}
                result = self._match_node(
                    edge.node, parts, index + 1, new_params, method, allowed
                )
                if result is not None:
                    return result

        # 3. Try catch-all
        if node.catch_all_route is not None:
            remaining = unquote("/".join(parts[index:]))
            new_params = {**params, node.catch_all_route.param_name: remaining}
            return self._answer(node.catch_all_route.route_by_method, method, new_params, allowed)

        return None

    @staticmethod
    def _answer(
        routes_by_method: dict[str, Route],
        method: str,
        params: dict[str, str],
        allowed: set[str],
    ) -> tuple[Route, dict[str, str]] | None:
        route = routes_by_method.get(method)
        if route is None and method == "HEAD":
            route = routes_by_method.get("GET")
        if route is not None:
            return route, params
        allowed.update(routes_by_method)
        return None


def _action_name(action: type[Any]) -> str:
    return getattr(action, "__qualname__", repr(action))
