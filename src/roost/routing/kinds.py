"""The seven RESTful action kinds.

The terminal tag of a route name selects one of these kinds, and the kind
alone fixes the HTTP method, whether an ``:id`` placeholder is appended,
and the literal suffix segment (``new``, ``edit``) if any.
"""

from __future__ import annotations

from enum import Enum

from roost.errors import UnrecognizedActionKind


class ActionKind(Enum):
    """A RESTful action kind, keyed by its tag spelling."""

    INDEX = "Index"
    SHOW = "Show"
    NEW = "New"
    CREATE = "Create"
    EDIT = "Edit"
    UPDATE = "Update"
    DELETE = "Delete"

    @property
    def method(self) -> str:
        return _METHODS[self]

    @property
    def member(self) -> bool:
        """True when the kind acts on one record and appends ``:id``."""
        return self in _MEMBER_KINDS

    @property
    def suffix(self) -> str | None:
        return _SUFFIXES.get(self)

    @classmethod
    def from_tag(cls, tag: str) -> ActionKind:
        """Look up a kind by its exact, case-sensitive tag.

        Raises ``UnrecognizedActionKind`` for anything else.
        """
        try:
            return cls(tag)
        except ValueError:
            raise UnrecognizedActionKind(tag) from None


_METHODS: dict[ActionKind, str] = {
    ActionKind.INDEX: "GET",
    ActionKind.SHOW: "GET",
    ActionKind.NEW: "GET",
    ActionKind.CREATE: "POST",
    ActionKind.EDIT: "GET",
    ActionKind.UPDATE: "PUT",
    ActionKind.DELETE: "DELETE",
}

_MEMBER_KINDS: frozenset[ActionKind] = frozenset(
    {ActionKind.SHOW, ActionKind.EDIT, ActionKind.UPDATE, ActionKind.DELETE}
)

_SUFFIXES: dict[ActionKind, str] = {
    ActionKind.NEW: "new",
    ActionKind.EDIT: "edit",
}
