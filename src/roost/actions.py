"""Action — a class that declares its route and handles the matching request.

The route is derived from the class name when the ``class`` statement
runs, so a misnamed action fails at import time, never at request time::

    from roost import Action

    class Users:
        class Index(Action):          # GET /users
            def call(self):
                return "all users"

        class Show(Action):           # GET /users/:id
            id: int

            def call(self):
                return f"user {self.id}"

    class Projects:
        class Users:
            class Index(Action, nested=True):   # GET /projects/:project_id/users
                project_id: int

                def call(self):
                    return f"users of project {self.project_id}"

Other class keywords:

- ``name="Api::V1::Users::Show"`` names the route explicitly instead of
  using ``__qualname__``.
- ``prefix="/admin"`` mounts the route (and every subclass) under a prefix.
- ``route=("GET", "/about")`` declares an explicit route, bypassing the
  naming convention.
- ``abstract=True`` marks an intermediate base class with no route.

Every placeholder in the route becomes a read-only accessor on the
instance. Annotating it (``id: int``) converts the captured string and
restricts matching to values the converter accepts.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from roost.config import RoutingConfig
from roost.errors import BadRequest, ConfigurationError, InvalidRouteName
from roost.http import Redirect, Request
from roost.routing.name import RouteName
from roost.routing.params import convert_param, converter_for
from roost.routing.pattern import RouteHelper, RoutePattern
from roost.routing.resolver import resolve
from roost.routing.route import Route
from roost.urls import is_safe_url

logger = logging.getLogger("roost.routing")

_DEFAULT_CONFIG = RoutingConfig()

# Set by Action.__init__; placeholders with these names stay in ``params``
_INSTANCE_ATTRS = frozenset({"config", "params", "request"})


class PathParam:
    """Descriptor exposing one captured placeholder on an action instance."""

    __slots__ = ("name", "param_type")

    def __init__(self, name: str, param_type: str = "str") -> None:
        self.name = name
        self.param_type = param_type

    def __get__(self, instance: Action | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        try:
            raw = instance.params[self.name]
        except KeyError:
            raise BadRequest(f"Missing path parameter {self.name!r}") from None
        if self.param_type in ("str", "path"):
            return raw
        try:
            return convert_param(raw, self.param_type)
        except ValueError:
            msg = f"Path parameter {self.name!r} must be {self.param_type}, got {raw!r}"
            raise BadRequest(msg) from None

    def __set__(self, instance: Action, value: Any) -> None:
        msg = f"Path parameter {self.name!r} is read-only"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"PathParam({self.name!r}, {self.param_type!r})"


class Action:
    """Base class for request-handling actions.

    Subclasses implement ``call()`` (sync or async). Instances are created
    per request by ``App.dispatch()`` and expose ``request``, ``params``
    (raw captured strings), ``config``, and one accessor per placeholder.
    """

    pattern: ClassVar[RoutePattern | None] = None
    route_name: ClassVar[RouteName | None] = None
    param_types: ClassVar[dict[str, str]] = {}
    abstract: ClassVar[bool] = True
    route_prefix: ClassVar[str] = ""

    def __init_subclass__(
        cls,
        *,
        name: str | None = None,
        nested: bool = False,
        prefix: str | None = None,
        route: tuple[str, str] | None = None,
        abstract: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if prefix is not None:
            cls.route_prefix = prefix
        cls.abstract = abstract

        if abstract:
            if name is not None or nested or route is not None:
                msg = f"Abstract action {cls.__qualname__} cannot declare a route"
                raise ConfigurationError(msg)
            cls.pattern = None
            cls.route_name = None
            cls.param_types = {}
            return

        if route is not None:
            if name is not None or nested:
                msg = f"{cls.__qualname__}: route=... cannot be combined with name= or nested="
                raise ConfigurationError(msg)
            method, path = route
            cls.route_name = None
            cls.pattern = RoutePattern(method, path).prefixed(cls.route_prefix)
        else:
            route_name = RouteName.parse(name) if name is not None else _name_from_qualname(cls)
            cls.route_name = route_name
            cls.pattern = resolve(route_name, nested=nested, prefix=cls.route_prefix)

        cls.param_types = _install_accessors(cls, cls.pattern)
        logger.debug("Declared %s -> %s", cls.__qualname__, cls.pattern)

    def __init__(
        self,
        request: Request,
        params: Mapping[str, str] | None = None,
        config: RoutingConfig | None = None,
    ) -> None:
        self.request = request
        self.params: Mapping[str, str] = MappingProxyType(dict(params or {}))
        self.config = config or _DEFAULT_CONFIG

    def call(self) -> Any:
        """Handle the request. Subclasses must override."""
        msg = f"{type(self).__qualname__} must implement call()"
        raise NotImplementedError(msg)

    # -- Helpers ----------------------------------------------------------

    @classmethod
    def as_route(cls) -> Route:
        """Return the ``Route`` binding this action's pattern to the class."""
        return Route(
            pattern=cls._require_pattern(),
            action=cls,
            name=cls.route_name,
            param_types=dict(cls.param_types),
        )

    @classmethod
    def path(cls, *values: Any, anchor: str | None = None, **query: Any) -> str:
        """Return this action's path with placeholders filled.

        ``Users.Show.path(42)`` -> ``"/users/42"``.
        """
        return cls._require_pattern().build(*values, anchor=anchor, **query)

    @classmethod
    def route(cls, *values: Any, anchor: str | None = None, **query: Any) -> RouteHelper:
        """Return the (method, path) pair for a concrete request target."""
        return cls._require_pattern().helper(*values, anchor=anchor, **query)

    @classmethod
    def url(
        cls,
        *values: Any,
        base_url: str | None = None,
        config: RoutingConfig | None = None,
        anchor: str | None = None,
        **query: Any,
    ) -> str:
        """Return this action's absolute URL.

        The base is *base_url* when given, else ``config.base_url``, else the
        default ``RoutingConfig().base_url``. Pass ``app.config`` to build
        the same URL ``app.url_for()`` does.
        """
        if base_url is None:
            base_url = (config or _DEFAULT_CONFIG).base_url
        return cls.route(*values, anchor=anchor, **query).url(base_url)

    @classmethod
    def _require_pattern(cls) -> RoutePattern:
        if cls.pattern is None:
            msg = f"{cls.__qualname__} is abstract and has no route"
            raise ConfigurationError(msg)
        return cls.pattern

    def redirect(
        self,
        to: type[Action] | RouteHelper | str,
        *values: Any,
        status: int | None = None,
        external: bool = False,
        anchor: str | None = None,
        **query: Any,
    ) -> Redirect:
        """Return a ``Redirect`` to another action, helper, or path.

        - An action class is built with *values* and *query*:
          ``self.redirect(Users.Show, 42)``.
        - A ``RouteHelper`` is used as-is: ``self.redirect(Users.Show.route(42))``.
        - A string must be a same-origin path unless ``external=True``.

        Raises ``ValueError`` for a non-3xx *status* or an unsafe string
        target, and ``TypeError`` for any other kind of target.
        """
        status = self.config.redirect_status if status is None else status
        if not 300 <= status < 400:
            msg = f"Redirect status must be 3xx, got {status}"
            raise ValueError(msg)

        if isinstance(to, type) and issubclass(to, Action):
            return Redirect(url=to.path(*values, anchor=anchor, **query), status=status)

        if values or query or anchor:
            msg = "Path values, query and anchor are only accepted with an action target"
            raise TypeError(msg)

        if isinstance(to, RouteHelper):
            return Redirect(url=to.path, status=status)

        if isinstance(to, str):
            if not external and not is_safe_url(to):
                msg = f"Refusing to redirect to {to!r}; pass external=True for off-site targets"
                raise ValueError(msg)
            return Redirect(url=to, status=status)

        msg = f"Cannot redirect to {type(to).__name__}"
        raise TypeError(msg)


def _name_from_qualname(cls: type) -> RouteName:
    """Derive a RouteName from nested class names.

    ``Api.V1.Users.Show`` -> ``Api::V1::Users::Show``. Anything up to a
    ``<locals>`` marker (classes defined inside functions) is ignored.
    """
    pieces = cls.__qualname__.split(".")
    if "<locals>" in pieces:
        last = len(pieces) - 1 - pieces[::-1].index("<locals>")
        pieces = pieces[last + 1 :]
    if len(pieces) < 2:
        msg = (
            f"Cannot derive a route for {cls.__qualname__!r}: nest it in a namespace "
            f"class (class Users: class {cls.__name__}(Action)) or pass name=..."
        )
        raise InvalidRouteName(msg)
    return RouteName.parse(".".join(pieces))


def _install_accessors(cls: type[Action], pattern: RoutePattern) -> dict[str, str]:
    """Attach a ``PathParam`` for each placeholder and return param types."""
    annotations = _collect_annotations(cls)
    globs = {s.param_name for s in pattern.segments if s.is_glob}
    param_types: dict[str, str] = {}

    for name in pattern.param_names:
        if name in globs:
            param_type = "path"
            if name in annotations and converter_for(annotations[name]) != "str":
                msg = f"{cls.__qualname__}.{name}: glob placeholders are always str"
                raise ConfigurationError(msg)
        elif name in annotations:
            converter = converter_for(annotations[name])
            if converter is None:
                msg = (
                    f"{cls.__qualname__}.{name}: unsupported annotation "
                    f"{annotations[name]!r}; use str, int or float"
                )
                raise ConfigurationError(msg)
            param_type = converter
        else:
            param_type = "str"
        param_types[name] = param_type

        if name in _INSTANCE_ATTRS:
            continue
        existing = inspect.getattr_static(cls, name, None)
        if existing is None or isinstance(existing, PathParam):
            setattr(cls, name, PathParam(name, param_type))

    return param_types


def _collect_annotations(cls: type) -> dict[str, Any]:
    """Merge annotations along the MRO, subclasses winning."""
    merged: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if klass is object or klass is Action:
            continue
        merged.update(inspect.get_annotations(klass))
    return merged
