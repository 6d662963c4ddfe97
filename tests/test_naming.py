"""Tests for roost.naming — underscore and singularize."""

import pytest

from roost.naming import singularize, underscore


class TestUnderscore:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("Users", "users"),
            ("MyAdminSection", "my_admin_section"),
            ("HTTPStatus", "http_status"),
            ("V1", "v1"),
            ("Api", "api"),
            ("OAuth2Clients", "o_auth2_clients"),
            ("sign-ins", "sign_ins"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_conversions(self, word: str, expected: str) -> None:
        assert underscore(word) == expected


class TestSingularize:
    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("projects", "project"),
            ("users", "user"),
            ("categories", "category"),
            ("addresses", "address"),
            ("boxes", "box"),
            ("matches", "match"),
            ("wishes", "wish"),
            ("statuses", "status"),
            ("houses", "house"),
            ("people", "person"),
            ("children", "child"),
            ("movies", "movie"),
            ("menus", "menu"),
            ("aliases", "alias"),
            ("causes", "cause"),
            ("bases", "base"),
        ],
    )
    def test_plural_words(self, word: str, expected: str) -> None:
        assert singularize(word) == expected

    @pytest.mark.parametrize("word", ["status", "address", "news", "sheep", "data", "analysis"])
    def test_already_singular_or_uncountable(self, word: str) -> None:
        assert singularize(word) == word

    def test_only_last_word_inflected(self) -> None:
        assert singularize("user_projects") == "user_project"
        assert singularize("news_categories") == "news_category"

    def test_deterministic(self) -> None:
        assert singularize("projects") == singularize("projects")

    def test_single_letter_untouched(self) -> None:
        assert singularize("s") == "s"

    def test_irregular_last_word(self) -> None:
        assert singularize("lunch_menus") == "lunch_menu"
