"""RouteName — a namespace-qualified identifier ending in an action kind."""

from __future__ import annotations

from dataclasses import dataclass

from roost.errors import InvalidRouteName
from roost.routing.kinds import ActionKind


@dataclass(frozen=True, slots=True)
class RouteName:
    """An immutable route name such as ``Api::V1::Users::Show``.

    ``segments`` holds every identifier before the tag, case preserved.
    The last of them is the resource; anything earlier is namespace (or,
    when resolved as nested, the parent resource).
    """

    segments: tuple[str, ...]
    kind: ActionKind

    def __post_init__(self) -> None:
        if not self.segments:
            msg = f"Route name for {self.kind.value!r} has no resource segment"
            raise InvalidRouteName(msg)
        for segment in self.segments:
            if not segment or not segment.isidentifier():
                msg = f"Invalid route name segment {segment!r} in {self.segments!r}"
                raise InvalidRouteName(msg)

    @classmethod
    def parse(cls, text: str, separator: str = "::") -> RouteName:
        """Parse ``"Users::Show"`` (or the dotted ``"Users.Show"``).

        Raises ``InvalidRouteName`` when the text has fewer than two
        pieces or an empty piece, and ``UnrecognizedActionKind`` when the
        last piece is not a known tag.
        """
        text = text.strip()
        pieces = text.split(separator) if separator in text else text.split(".")
        if len(pieces) < 2 or any(not p for p in pieces):
            msg = f"Route name {text!r} must look like 'Resource{separator}Kind'"
            raise InvalidRouteName(msg)
        *segments, tag = pieces
        return cls(segments=tuple(segments), kind=ActionKind.from_tag(tag))

    @property
    def resource(self) -> str:
        return self.segments[-1]

    @property
    def parent(self) -> str | None:
        """The segment before the resource, if any."""
        return self.segments[-2] if len(self.segments) > 1 else None

    def __str__(self) -> str:
        return "::".join((*self.segments, self.kind.value))
