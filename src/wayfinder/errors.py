"""Wayfinder exception hierarchy.

Shared across the route tree, the router, the URL builder and the
preload engine so every module raises and catches the same types.
"""

from typing import Any


class WayfinderError(Exception):
    """Base for all wayfinder-specific errors."""


class ConfigurationError(WayfinderError):
    """Raised when a route table, manifest, or config object is invalid.

    Typically raised while a ``Router`` is being constructed, i.e. at startup.
    """


class RouteConflict(ConfigurationError):
    """The route table is empty, unrooted, or ambiguous.

    Fatal: a router is never produced from a conflicting table.
    """


class NoMatch(WayfinderError):  # noqa: N818
    """No registered route matches *pathname*."""

    def __init__(self, pathname: str) -> None:
        self.pathname = pathname
        super().__init__(f"No route found for pathname: {pathname!r}")


class MissingRequiredParameter(WayfinderError):
    """A URL was requested without a value for a required parameter."""

    def __init__(self, param: str, pattern: str) -> None:
        self.param = param
        self.pattern = pattern
        super().__init__(f"Missing required parameter {param!r} for route {pattern!r}")


class UnregisteredRoute(WayfinderError):
    """A URL was requested for a route this router never registered."""

    def __init__(self, route: Any) -> None:
        self.route = route
        path = getattr(route, "path", route)
        super().__init__(f"Route {path!r} is not registered in the router")
