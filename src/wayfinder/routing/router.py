"""Client-side router: pathname -> metadata, and route + params -> URL.

The route table is built once at construction into a ``RouteTree`` and
never changes afterwards. Resolved metadata is memoized per exact
pathname for the router's lifetime; a failed lookup is never cached.
"""

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from contextlib import nullcontext
from typing import Any

from wayfinder.config import RouterConfig
from wayfinder.errors import NoMatch, RouteConflict, UnregisteredRoute
from wayfinder.routing.callbacks import CallbackSet
from wayfinder.routing.location import Location, MemoryLocation
from wayfinder.routing.route import Route
from wayfinder.routing.tree import RouteTree, extract_params
from wayfinder.routing.url import QueryValue, build_path

logger = logging.getLogger("wayfinder.routing")

# Marks a failed lookup (a factory may legitimately return None)
_MISSING = object()


class Router[M]:
    """Maps pathnames to application metadata.

    Usage::

        home = Route("/", lambda p: HomePage())
        post = Route("/posts/:id?", lambda p: PostPage(p["id"]))

        router = Router([home, post])
        router.resolve("/posts/7")           # PostPage("7")
        router.resolve("/posts")             # PostPage(None)
        router.url(post, {"id": "7"})        # "/posts/7"

    The first route must be ``/``. Construction raises ``RouteConflict``
    on an empty table, an unrooted table, conflicting parameter names at
    the same position, or two different routes with the same pattern.
    """

    __slots__ = (
        "_cache_lock",
        "_config",
        "_location",
        "_metadata_cache",
        "_registered",
        "_subscribers",
        "_tree",
    )

    def __init__(
        self,
        routes: Sequence[Route[M]],
        location: Location | None = None,
        config: RouterConfig | None = None,
    ) -> None:
        if not routes:
            msg = "At least one route is required to build the route tree."
            raise RouteConflict(msg)

        first = routes[0]
        if first.path != "/":
            msg = f"The first route must be the root route with path '/', got {first.path!r}"
            raise RouteConflict(msg)

        tree: RouteTree[M] = RouteTree(first)
        for route in routes[1:]:
            tree.insert(route)

        self._config = config or RouterConfig()
        self._tree = tree
        self._registered: set[Route[M]] = set(routes)
        self._metadata_cache: dict[str, M] = {}
        self._cache_lock = threading.Lock() if self._config.thread_safe else nullcontext()
        self._subscribers: CallbackSet[M] = CallbackSet()
        self._location: Location = location if location is not None else MemoryLocation()
        self._location.add_listener(self._on_location_change)

        logger.debug("Router built with %d routes", len(routes))

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> list[Route[M]]:
        """All routes reachable in the trie, root first."""
        return self._tree.routes

    # -- Resolution --------------------------------------------------------

    def resolve(self, pathname: str) -> M:
        """Resolve *pathname* to metadata.

        Raises ``NoMatch`` if no route matches. The router supplies no
        fallback route; that policy belongs to the caller.
        """
        metadata = self._resolve(pathname)
        if metadata is _MISSING:
            raise NoMatch(pathname)
        return metadata  # type: ignore[return-value]

    def find(self, pathname: str) -> M | None:
        """Like ``resolve()``, but return None when nothing matches."""
        metadata = self._resolve(pathname)
        if metadata is _MISSING:
            return None
        return metadata  # type: ignore[return-value]

    def _resolve(self, pathname: str) -> M | object:
        if self._config.cache_metadata:
            with self._cache_lock:
                cached = self._metadata_cache.get(pathname, _MISSING)
            if cached is not _MISSING:
                return cached

        route = self._tree.lookup(pathname)
        if route is None:
            logger.debug("No route for %r", pathname)
            return _MISSING

        params = extract_params(route, pathname)
        logger.debug("Resolved %r -> %r %r", pathname, route.path, params)
        metadata = route.factory(params)

        if self._config.cache_metadata:
            with self._cache_lock:
                # A concurrent resolver may have won; keep its instance
                metadata = self._metadata_cache.setdefault(pathname, metadata)
        return metadata

    # -- URL building ------------------------------------------------------

    def url(
        self,
        route: Route[Any],
        params: Mapping[str, object] | None = None,
        query: Mapping[str, QueryValue] | None = None,
    ) -> str:
        """Build a concrete URL for a registered *route*.

        Raises ``UnregisteredRoute`` if *route* was not passed to this
        router, and ``MissingRequiredParameter`` if a required parameter
        has no value.
        """
        if route not in self._registered:
            raise UnregisteredRoute(route)
        return build_path(route, params or {}, query)

    # -- Navigation --------------------------------------------------------

    def path(self) -> str:
        """The host's current pathname, verbatim."""
        return self._location.get_pathname()

    def current(self) -> M:
        """Metadata for the host's current pathname. Raises ``NoMatch``."""
        return self.resolve(self._location.get_pathname())

    def navigate(self, to: str) -> None:
        """Ask the host to navigate, then notify subscribers."""
        self._location.navigate(to)
        self._subscribers.call(self.current())

    def on_navigate(self, callback: Callable[[M], None]) -> Callable[[], None]:
        """Subscribe to navigations.

        *callback* is invoked immediately with the current metadata and
        again after every navigation. Returns an unsubscribe function.
        Raises ``NoMatch`` without subscribing if the current pathname
        has no route.
        """
        metadata = self.current()
        unsubscribe = self._subscribers.add(callback)
        callback(metadata)
        return unsubscribe

    def _on_location_change(self) -> None:
        self._subscribers.call(self.current())

    # -- Teardown ----------------------------------------------------------

    def cleanup(self) -> None:
        """Release the trie, caches, subscribers and host listener.

        Idempotent. The router matches nothing afterwards.
        """
        self._location.remove_listener(self._on_location_change)
        self._subscribers.clear()
        self._registered.clear()
        with self._cache_lock:
            self._metadata_cache.clear()
        self._tree.clear()
