"""Roost — convention-named actions for Python web applications.

An action's class name is its route. ``Users.Show`` answers
``GET /users/:id``; ``Projects.Users.Index`` declared with ``nested=True``
answers ``GET /projects/:project_id/users``.

Basic usage::

    from roost import Action, App

    class Users:
        class Show(Action):
            id: int

            def call(self):
                return f"user {self.id}"

    app = App()
    app.mount(Users.Show)

    Users.Show.path(42)                   # "/users/42"
    await app.handle("GET", "/users/42")  # "user 42"

Resolving names without declaring actions::

    from roost import resolve_name

    resolve_name("Api::V1::Users::Show")  # RoutePattern("GET", "/api/v1/users/:id")
"""

__version__ = "0.1.0"
__all__ = [
    "Action",
    "ActionKind",
    "App",
    "BadRequest",
    "ConfigurationError",
    "DuplicateRoute",
    "HTTPError",
    "InvalidRouteName",
    "MethodNotAllowed",
    "MissingRouteParam",
    "NotFound",
    "Redirect",
    "Request",
    "RoostError",
    "RouteHelper",
    "RouteName",
    "RoutePattern",
    "RoutingConfig",
    "TooManyRouteParams",
    "UnrecognizedActionKind",
    "resolve",
    "resolve_name",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "Action": "roost.actions",
    "ActionKind": "roost.routing.kinds",
    "App": "roost.app",
    "BadRequest": "roost.errors",
    "ConfigurationError": "roost.errors",
    "DuplicateRoute": "roost.errors",
    "HTTPError": "roost.errors",
    "InvalidRouteName": "roost.errors",
    "MethodNotAllowed": "roost.errors",
    "MissingRouteParam": "roost.errors",
    "NotFound": "roost.errors",
    "Redirect": "roost.http",
    "Request": "roost.http",
    "RoostError": "roost.errors",
    "RouteHelper": "roost.routing.pattern",
    "RouteName": "roost.routing.name",
    "RoutePattern": "roost.routing.pattern",
    "RoutingConfig": "roost.config",
    "TooManyRouteParams": "roost.errors",
    "UnrecognizedActionKind": "roost.errors",
    "resolve": "roost.routing.resolver",
    "resolve_name": "roost.routing.resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
