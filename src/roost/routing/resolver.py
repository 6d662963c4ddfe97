"""Convention resolver — RouteName to RoutePattern.

The mapping is a total function of the name, the nesting mode and an
optional prefix::

    Users::Index                      GET    /users
    Users::Show                       GET    /users/:id
    Users::New                        GET    /users/new
    Users::Create                     POST   /users
    Users::Edit                       GET    /users/:id/edit
    Users::Update                     PUT    /users/:id
    Users::Delete                     DELETE /users/:id
    Api::V1::Users::Show              GET    /api/v1/users/:id
    Projects::Users::Index (nested)   GET    /projects/:project_id/users

Results are memoized: a RouteName is immutable, so resolving it twice
always yields the same pattern.
"""

from functools import lru_cache

from roost.errors import InvalidRouteName
from roost.naming import singularize, underscore
from roost.routing.name import RouteName
from roost.routing.pattern import RoutePattern, join_paths

ID_PARAM = "id"


@lru_cache(maxsize=1024)
def resolve(name: RouteName, *, nested: bool = False, prefix: str = "") -> RoutePattern:
    """Translate *name* into its HTTP method and path template.

    In nested mode the segment before the resource is treated as the
    parent: its underscored form and a ``:<singular>_id`` placeholder are
    inserted ahead of the resource segment.

    Raises ``InvalidRouteName`` when nested mode is requested for a name
    with no parent segment.
    """
    *leading, resource = name.segments
    parts: list[str] = []

    if nested:
        if not leading:
            msg = f"Nested route {str(name)!r} needs a parent segment before {resource!r}"
            raise InvalidRouteName(msg)
        *namespace, parent = leading
        parts.extend(underscore(segment) for segment in namespace)
        parent_path = underscore(parent)
        parts.append(parent_path)
        parts.append(f":{singularize(parent_path)}_id")
    else:
        parts.extend(underscore(segment) for segment in leading)

    parts.append(underscore(resource))

    kind = name.kind
    if kind.member:
        parts.append(f":{ID_PARAM}")
    if kind.suffix is not None:
        parts.append(kind.suffix)

    return RoutePattern(kind.method, join_paths(prefix, *parts))


def resolve_name(
    text: str,
    *,
    nested: bool = False,
    prefix: str = "",
    separator: str = "::",
) -> RoutePattern:
    """Parse *text* as a RouteName and resolve it."""
    return resolve(RouteName.parse(text, separator), nested=nested, prefix=prefix)
