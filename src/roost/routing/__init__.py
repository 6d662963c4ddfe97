"""Routing — convention resolution and a compiled route table.

Route names resolve to patterns when actions are declared. Patterns are
compiled into an immutable trie when the app freezes.
"""

from roost.routing.kinds import ActionKind
from roost.routing.name import RouteName
from roost.routing.pattern import PathSegment, RouteHelper, RoutePattern, parse_path
from roost.routing.resolver import resolve, resolve_name

__all__ = [
    "ActionKind",
    "PathSegment",
    "RouteHelper",
    "RouteName",
    "RoutePattern",
    "parse_path",
    "resolve",
    "resolve_name",
]
