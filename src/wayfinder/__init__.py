"""Wayfinder — route resolution for client navigation and server preloading.

Maps URL paths to application-defined metadata and back, with a
segment trie on the client side and a linear, declaration-ordered
matcher on the server side.

Basic usage::

    from wayfinder import Route, Router

    home = Route("/", lambda params: "home")
    user = Route("/users/:id", lambda params: f"user {params['id']}")

    router = Router([home, user])
    router.resolve("/users/42")        # "user 42"
    router.url(user, {"id": "7"})      # "/users/7"

Server preloading::

    from wayfinder import PreloadEngine, load_route_specs

    engine = PreloadEngine(load_route_specs("preload.json"), preload)
    results = await engine.execute_for_path("/users/42")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MemoryLocation",
    "MissingRequiredParameter",
    "NoMatch",
    "PreloadConfig",
    "PreloadEngine",
    "PreloadedCall",
    "Route",
    "RouteConflict",
    "RouteSpec",
    "Router",
    "RouterConfig",
    "RpcSpec",
    "UnregisteredRoute",
    "WayfinderError",
    "load_route_specs",
    "match_pattern",
    "match_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wayfinder`` fast; the preload engine pulls in anyio.
    """
    if name == "Router":
        from wayfinder.routing.router import Router

        return Router

    if name == "Route":
        from wayfinder.routing.route import Route

        return Route

    if name == "MemoryLocation":
        from wayfinder.routing.location import MemoryLocation

        return MemoryLocation

    if name in ("RouterConfig", "PreloadConfig"):
        from wayfinder import config as _config

        return getattr(_config, name)

    if name in (
        "ConfigurationError",
        "MissingRequiredParameter",
        "NoMatch",
        "RouteConflict",
        "UnregisteredRoute",
        "WayfinderError",
    ):
        from wayfinder import errors as _errors

        return getattr(_errors, name)

    if name in ("PreloadEngine", "PreloadedCall"):
        from wayfinder.preload import engine as _engine

        return getattr(_engine, name)

    if name in ("RouteSpec", "RpcSpec", "load_route_specs"):
        from wayfinder.preload import spec as _spec

        return getattr(_spec, name)

    if name in ("match_pattern", "match_route"):
        from wayfinder.preload import matcher as _matcher

        return getattr(_matcher, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
