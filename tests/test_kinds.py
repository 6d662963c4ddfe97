"""Tests for roost.routing.kinds — the seven action kinds."""

import pytest

from roost.errors import ConfigurationError, UnrecognizedActionKind
from roost.routing.kinds import ActionKind


class TestActionKind:
    def test_exactly_seven_kinds(self) -> None:
        assert [k.value for k in ActionKind] == [
            "Index",
            "Show",
            "New",
            "Create",
            "Edit",
            "Update",
            "Delete",
        ]

    @pytest.mark.parametrize(
        ("kind", "method", "member", "suffix"),
        [
            (ActionKind.INDEX, "GET", False, None),
            (ActionKind.SHOW, "GET", True, None),
            (ActionKind.NEW, "GET", False, "new"),
            (ActionKind.CREATE, "POST", False, None),
            (ActionKind.EDIT, "GET", True, "edit"),
            (ActionKind.UPDATE, "PUT", True, None),
            (ActionKind.DELETE, "DELETE", True, None),
        ],
    )
    def test_table(self, kind: ActionKind, method: str, member: bool, suffix: str | None) -> None:
        assert kind.method == method
        assert kind.member is member
        assert kind.suffix == suffix


class TestFromTag:
    def test_known_tag(self) -> None:
        assert ActionKind.from_tag("Show") is ActionKind.SHOW

    def test_unknown_tag(self) -> None:
        with pytest.raises(UnrecognizedActionKind) as exc_info:
            ActionKind.from_tag("Archive")
        assert exc_info.value.tag == "Archive"
        assert "Archive" in str(exc_info.value)
        assert "Index" in str(exc_info.value)

    def test_case_sensitive(self) -> None:
        with pytest.raises(UnrecognizedActionKind):
            ActionKind.from_tag("show")

    def test_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            ActionKind.from_tag("Destroy")
