"""Route trie keyed by path segments.

Static edges are preferred over the single dynamic edge at each node,
so ``/users/me`` beats ``/users/:id`` for the path ``/users/me``
regardless of registration order. Lookup does not backtrack: once a
static edge is taken, the dynamic sibling is never revisited.
"""

from dataclasses import dataclass
from typing import Any

from wayfinder.errors import RouteConflict
from wayfinder.routing.pattern import Dynamic, split_path
from wayfinder.routing.route import Route


class _TrieNode[M]:
    """A node in the route trie. Mutable during construction only."""

    __slots__ = ("dynamic_child", "route", "static_children")

    def __init__(self) -> None:
        # Route that ends here, making this node a valid match endpoint
        self.route: Route[M] | None = None
        # Literal segment children: "users" -> node
        self.static_children: dict[str, _TrieNode[M]] = {}
        # Single parameter child; every route through here shares its name
        self.dynamic_child: _DynamicEdge[M] | None = None


@dataclass(slots=True)
class _DynamicEdge[M]:
    """A parameter edge in the trie."""

    name: str
    # True once any route through here declared the parameter optional
    optional: bool
    node: _TrieNode[M]


class RouteTree[M]:
    """Trie of registered routes, seeded with the root route.

    Usage::

        tree = RouteTree(Route("/", home))
        tree.insert(Route("/users/:id", user))
        route = tree.lookup("/users/42")
        params = extract_params(route, "/users/42")  # {"id": "42"}
    """

    __slots__ = ("_root",)

    def __init__(self, root: Route[M]) -> None:
        if root.segments:
            msg = f"The root route must have path '/', got {root.path!r}"
            raise RouteConflict(msg)
        self._root: _TrieNode[M] = _TrieNode()
        self._root.route = root

    @property
    def root(self) -> Route[M] | None:
        """The route registered at ``/``, or None after ``clear()``."""
        return self._root.route

    def insert(self, route: Route[M]) -> None:
        """Add *route* to the trie.

        Raises ``RouteConflict`` if a different parameter name already
        occupies a dynamic position on this path, or if a different route
        already ends at the same node. Re-inserting the same route object
        is a no-op.
        """
        node = self._root

        for seg in route.segments:
            if isinstance(seg, Dynamic):
                edge = node.dynamic_child
                if edge is None:
                    edge = _DynamicEdge(name=seg.name, optional=seg.optional, node=_TrieNode())
                    node.dynamic_child = edge
                elif edge.name != seg.name:
                    msg = (
                        f"Conflicting dynamic segments: ':{edge.name}' and ':{seg.name}' "
                        f"(while adding {route.path!r})"
                    )
                    raise RouteConflict(msg)
                else:
                    edge.optional = edge.optional or seg.optional

                # The path without the optional tail resolves to this route too
                if seg.optional and node.route is None:
                    node.route = route

                node = edge.node
            else:
                child = node.static_children.get(seg.text)
                if child is None:
                    child = _TrieNode()
                    node.static_children[seg.text] = child
                node = child

        if node.route is not None and node.route is not route:
            msg = f"Conflicting routes for path: {route.path!r} (already taken by {node.route.path!r})"
            raise RouteConflict(msg)

        node.route = route

    def lookup(self, pathname: str) -> Route[M] | None:
        """Return the route matching *pathname*, or None.

        *pathname* must start with ``/``. Empty segments (from trailing or
        doubled slashes) never match a dynamic edge, so ``/users/`` does
        not match ``/users/:id``.
        """
        if not pathname.startswith("/"):
            return None
        if pathname == "/":
            return self._root.route

        node = self._root
        for part in pathname[1:].split("/"):
            child = node.static_children.get(part)
            if child is not None:
                node = child
            elif node.dynamic_child is not None and part:
                node = node.dynamic_child.node
            else:
                return None

        return node.route

    @property
    def routes(self) -> list[Route[M]]:
        """Return all registered routes, each once, root first.

        Traverses the trie depth-first, static children before the
        dynamic child.
        """
        seen: set[int] = set()
        result: list[Route[M]] = []
        self._collect_routes(self._root, seen, result)
        return result

    def _collect_routes(
        self,
        node: _TrieNode[M],
        seen: set[int],
        result: list[Route[M]],
    ) -> None:
        if node.route is not None and id(node.route) not in seen:
            seen.add(id(node.route))
            result.append(node.route)

        for child in node.static_children.values():
            self._collect_routes(child, seen, result)

        if node.dynamic_child is not None:
            self._collect_routes(node.dynamic_child.node, seen, result)

    def clear(self) -> None:
        """Drop every node. Lookups afterwards match nothing."""
        self._root = _TrieNode()


def extract_params(route: Route[Any], pathname: str) -> dict[str, str | None]:
    """Bind *route*'s parameters from *pathname* by segment index.

    A parameter with no segment at its index (only possible for a
    trailing optional parameter) is bound to None.
    """
    parts = split_path(pathname)
    params: dict[str, str | None] = {}
    for i, seg in enumerate(route.segments):
        if isinstance(seg, Dynamic):
            params[seg.name] = parts[i] if i < len(parts) else None
    return params
