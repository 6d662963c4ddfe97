"""Tests for roost.errors — exception hierarchy and error messages."""

import pytest

from roost.errors import (
    BadRequest,
    ConfigurationError,
    DuplicateRoute,
    HTTPError,
    InvalidRouteName,
    MethodNotAllowed,
    MissingRouteParam,
    NotFound,
    RoostError,
    RouteParamError,
    TooManyRouteParams,
    UnrecognizedActionKind,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [InvalidRouteName, UnrecognizedActionKind, DuplicateRoute],
    )
    def test_definition_errors_are_configuration_errors(self, exc_type: type) -> None:
        assert issubclass(exc_type, ConfigurationError)

    @pytest.mark.parametrize("exc_type", [MissingRouteParam, TooManyRouteParams])
    def test_param_errors(self, exc_type: type) -> None:
        assert issubclass(exc_type, RouteParamError)
        assert not issubclass(exc_type, ConfigurationError)

    @pytest.mark.parametrize("exc_type", [BadRequest, NotFound, MethodNotAllowed])
    def test_http_errors(self, exc_type: type) -> None:
        assert issubclass(exc_type, HTTPError)

    def test_everything_is_roost_error(self) -> None:
        for exc_type in (ConfigurationError, RouteParamError, HTTPError):
            assert issubclass(exc_type, RoostError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad id")) == "400: Bad id"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestSubclasses:
    def test_bad_request(self) -> None:
        err = BadRequest()
        assert err.status == 400
        assert err.detail == "Bad Request"

    def test_not_found_custom_detail(self) -> None:
        err = NotFound("No user")
        assert err.status == 404
        assert err.detail == "No user"

    def test_method_not_allowed(self) -> None:
        err = MethodNotAllowed(frozenset({"PUT", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, PUT"),)
        assert "GET, PUT" in err.detail


class TestUnrecognizedActionKind:
    def test_message_lists_known_kinds(self) -> None:
        err = UnrecognizedActionKind("Archive")
        message = str(err)
        assert "'Archive'" in message
        for tag in ("Index", "Show", "New", "Create", "Edit", "Update", "Delete"):
            assert tag in message

    def test_tag_attribute(self) -> None:
        assert UnrecognizedActionKind("Archive").tag == "Archive"
