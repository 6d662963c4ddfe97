"""Tests for roost.routing.route — Route and RouteMatch."""

import pytest

from roost.routing.name import RouteName
from roost.routing.pattern import RoutePattern
from roost.routing.route import Route, RouteMatch


class _Handler:
    pass


class TestRoute:
    def test_creation(self) -> None:
        route = Route(pattern=RoutePattern("GET", "/users"), action=_Handler)
        assert route.method == "GET"
        assert route.path == "/users"
        assert route.action is _Handler
        assert route.name is None
        assert route.param_types == {}

    def test_named_route(self) -> None:
        name = RouteName.parse("Users::Index")
        route = Route(pattern=RoutePattern("GET", "/users"), action=_Handler, name=name)
        assert route.name == name

    def test_hashable_despite_param_types(self) -> None:
        route = Route(
            pattern=RoutePattern("GET", "/users/:id"),
            action=_Handler,
            param_types={"id": "int"},
        )
        assert hash(route) == hash(Route(pattern=RoutePattern("GET", "/users/:id"), action=_Handler))

    def test_frozen(self) -> None:
        route = Route(pattern=RoutePattern("GET", "/"), action=_Handler)
        with pytest.raises(AttributeError):
            route.action = object  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route(pattern=RoutePattern("GET", "/users/:id"), action=_Handler)
        match = RouteMatch(route=route, path_params={"id": "42"})
        assert match.route is route
        assert match.path_params == {"id": "42"}
