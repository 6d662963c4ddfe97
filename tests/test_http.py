"""Tests for roost.http — Request and Redirect."""

import pytest

from roost.http import Redirect, Request


class TestRequest:
    def test_from_target_splits_query(self) -> None:
        request = Request.from_target("get", "/users?page=2&sort=")
        assert request.method == "GET"
        assert request.path == "/users"
        assert request.query == {"page": "2", "sort": ""}

    def test_from_target_without_path(self) -> None:
        assert Request.from_target("GET", "?q=1").path == "/"

    def test_query_is_read_only(self) -> None:
        request = Request.from_target("GET", "/users?page=2")
        with pytest.raises(TypeError):
            request.query["page"] = "3"  # type: ignore[index]

    def test_default_query_empty(self) -> None:
        assert dict(Request("GET", "/").query) == {}

    def test_header_lookup_case_insensitive(self) -> None:
        request = Request("GET", "/", headers=(("Accept", "text/html"),))
        assert request.header("accept") == "text/html"
        assert request.header("X-Missing") is None
        assert request.header("X-Missing", "none") == "none"


class TestRedirect:
    def test_defaults(self) -> None:
        redirect = Redirect("/users")
        assert redirect.status == 302
        assert redirect.location == "/users"
        assert redirect.headers == ()
