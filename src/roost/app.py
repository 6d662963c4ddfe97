"""Roost application class.

Mutable during setup (mounting actions).
Frozen when ``freeze()``, ``dispatch()`` or ``url_for()`` is first invoked.
"""

import logging
import threading
from types import ModuleType
from typing import Any

from roost._internal.invoke import invoke
from roost.actions import Action
from roost.config import RoutingConfig
from roost.errors import ConfigurationError
from roost.http import Request
from roost.routing.name import RouteName
from roost.routing.route import Route
from roost.routing.router import Router

logger = logging.getLogger("roost.app")


class App:
    """A set of mounted actions and the router compiled from them.

    Usage::

        app = App()
        app.mount(Users.Index, Users.Show)
        app.scan(myapp.actions)

        result = await app.handle("GET", "/users/42")
        app.url_for(Users.Show, 42)       # "http://localhost:8000/users/42"
        app.url_for("Users::Show", 42)    # same, looked up by route name
    """

    def __init__(self, config: RoutingConfig | None = None) -> None:
        self.config: RoutingConfig = config or RoutingConfig()
        self._pending_routes: list[Route] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._by_name: dict[RouteName, Route] = {}

    # -- Mounting --

    def mount(self, *actions: type[Action]) -> None:
        """Mount action classes. Must be called before the app freezes.

        Raises ``ConfigurationError`` for abstract actions, for anything
        that is not an ``Action`` subclass, and after freezing.
        """
        self._check_not_frozen()
        for action in actions:
            if not (isinstance(action, type) and issubclass(action, Action)):
                msg = f"Cannot mount {action!r}: not an Action subclass"
                raise ConfigurationError(msg)
            if action.abstract:
                msg = f"Cannot mount abstract action {action.__qualname__}"
                raise ConfigurationError(msg)
            self._pending_routes.append(action.as_route())

    def scan(self, module: ModuleType) -> list[type[Action]]:
        """Mount every concrete action defined in *module*.

        Actions nested inside namespace classes (``class Users: class
        Show(Action)``) are found too. Returns the mounted classes in
        definition order.
        """
        found = list(_discover(module))
        self.mount(*found)
        logger.debug("Scanned %s: %d action(s)", module.__name__, len(found))
        return found

    # -- Runtime --

    def freeze(self) -> None:
        """Compile the route table. Safe to call more than once."""
        self._ensure_frozen()

    @property
    def routes(self) -> list[Route]:
        return self._ensure_frozen().routes

    async def dispatch(self, request: Request) -> Any:
        """Route *request* to its action and return what ``call()`` returns.

        Raises ``NotFound``, ``MethodNotAllowed``, or ``BadRequest`` for
        requests that cannot be handled.
        """
        router = self._ensure_frozen()
        match = router.match(request.method, request.path)
        action_cls = match.route.action
        logger.debug(
            "%s %s -> %s %s", request.method, request.path, action_cls.__qualname__, match.path_params
        )
        action = action_cls(request, match.path_params, self.config)
        return await invoke(action.call)

    async def handle(
        self,
        method: str,
        target: str,
        headers: tuple[tuple[str, str], ...] = (),
    ) -> Any:
        """Dispatch a request given as a method and a request target."""
        return await self.dispatch(Request.from_target(method, target, headers))

    def path_for(self, target: type[Action] | str, *values: Any, **query: Any) -> str:
        """Return the path of an action class or a mounted route name."""
        if isinstance(target, str):
            return self._route_named(target).pattern.build(*values, **query)
        return target.path(*values, **query)

    def url_for(self, target: type[Action] | str, *values: Any, **query: Any) -> str:
        """Return the absolute URL of an action class or a mounted route name."""
        return self.config.base_url.rstrip("/") + self.path_for(target, *values, **query)

    # -- Internal --

    def _route_named(self, text: str) -> Route:
        self._ensure_frozen()
        name = RouteName.parse(text, self.config.name_separator)
        try:
            return self._by_name[name]
        except KeyError:
            msg = f"No mounted route is named {str(name)!r}"
            raise ConfigurationError(msg) from None

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot mount actions after the app has been frozen."
            raise ConfigurationError(msg)

    def _ensure_frozen(self) -> Router:
        """Thread-safe freeze with double-check locking.

        Concurrent first requests must not compile the router twice.
        Returns the compiled router.
        """
        router = self._router
        if router is not None:
            return router
        with self._freeze_lock:
            router = self._router
            if router is None:
                router = self._freeze()
            return router

    def _freeze(self) -> Router:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router(strict_slashes=self.config.strict_slashes)
        by_name: dict[RouteName, Route] = {}
        for route in self._pending_routes:
            router.add(route)
            if route.name is not None:
                by_name.setdefault(route.name, route)
        router.compile()

        # Published last, since _ensure_frozen reads _router without the lock
        self._by_name = by_name
        self._frozen = True
        self._router = router
        logger.info("Compiled %d route(s)", len(self._pending_routes))
        return router


def _discover(module: ModuleType) -> list[type[Action]]:
    """Collect concrete actions defined in *module*, in definition order."""
    found: list[type[Action]] = []
    seen: set[int] = set()

    def visit(namespace: dict[str, Any]) -> None:
        for obj in namespace.values():
            if not isinstance(obj, type) or id(obj) in seen:
                continue
            if obj.__module__ != module.__name__:
                continue
            seen.add(id(obj))
            if issubclass(obj, Action) and not obj.abstract:
                found.append(obj)
            visit(vars(obj))

    visit(vars(module))
    return found
