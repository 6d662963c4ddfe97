"""Tests for roost.cli._resolve and ``roost routes``."""

import sys
import types

import pytest

from roost.actions import Action
from roost.app import App
from roost.cli import main
from roost.cli._resolve import resolve_app


class Users:
    class Index(Action):
        pass

    class Show(Action):
        id: int


@pytest.fixture
def _fake_app_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with roost Apps on sys.modules."""
    app = App()
    app.mount(Users.Index, Users.Show)

    mod = types.ModuleType("_fake_roost_app")
    mod.app = app  # type: ignore[attr-defined]
    mod.empty = App()  # type: ignore[attr-defined]
    mod.factory = lambda: app  # type: ignore[attr-defined]
    mod.not_an_app = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_roost_app", mod)


@pytest.mark.usefixtures("_fake_app_module")
class TestResolveApp:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_app("_fake_roost_app:app"), App)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'app'."""
        assert isinstance(resolve_app("_fake_roost_app"), App)

    def test_factory(self) -> None:
        assert resolve_app("_fake_roost_app:factory") is resolve_app("_fake_roost_app:app")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("nonexistent_module_xyz:app")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_app("_fake_roost_app:does_not_exist")

    def test_not_an_app(self) -> None:
        with pytest.raises(TypeError, match="not a roost.App"):
            resolve_app("_fake_roost_app:not_an_app")


@pytest.mark.usefixtures("_fake_app_module")
class TestRoutesCommand:
    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_app:app"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["METHOD", "PATH", "ACTION"]
        assert lines[2].split()[:2] == ["GET", "/users"]
        assert lines[3].split()[:2] == ["GET", "/users/:id"]
        assert "(Users::Show)" in lines[3]

    def test_empty_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_app:empty"])
        assert "No routes mounted." in capsys.readouterr().out

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_roost_app:not_an_app"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
