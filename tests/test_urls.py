"""Tests for is_safe_url — open redirect prevention."""

from roost.urls import is_safe_url


class TestIsSafeUrl:
    # -- Safe URLs --

    def test_simple_path(self) -> None:
        assert is_safe_url("/dashboard") is True

    def test_root(self) -> None:
        assert is_safe_url("/") is True

    def test_path_with_query(self) -> None:
        assert is_safe_url("/login?next=/home") is True

    def test_path_with_fragment(self) -> None:
        assert is_safe_url("/page#section") is True

    # -- Unsafe URLs --

    def test_empty(self) -> None:
        assert is_safe_url("") is False

    def test_protocol_relative(self) -> None:
        assert is_safe_url("//evil.com") is False

    def test_absolute(self) -> None:
        assert is_safe_url("https://evil.com") is False

    def test_relative_without_slash(self) -> None:
        assert is_safe_url("users") is False

    def test_backslash(self) -> None:
        assert is_safe_url("/\\evil.com") is False

    def test_embedded_scheme(self) -> None:
        assert is_safe_url("/redirect?to=https://evil.com") is False
