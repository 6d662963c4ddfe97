"""Routing configuration.

RoutingConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Routing configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RoutingConfig(base_url="https://example.com", strict_slashes=True)
    """

    # URL generation
    base_url: str = "http://localhost:8000"  # Used by App.url_for() and Action.url(config=...)

    # Route names
    name_separator: str = "::"

    # Redirects
    redirect_status: int = 302

    # When False, "/users/" matches "/users"
    strict_slashes: bool = False
