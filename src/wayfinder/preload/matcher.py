"""Linear route matching for server-side preloading.

Patterns are tried in declaration order and the first match wins::

    match_pattern("/users/:id", "/users/me")      # {"id": "me"}
    match_route([spec("/users/:id"), spec("/users/me")], "/users/me")
    # -> the "/users/:id" spec, because it was declared first

This deliberately differs from the client-side trie, which would pick
``/users/me``. Declare specific patterns before general ones.
"""

from collections.abc import Sequence

from wayfinder.preload.spec import RouteSpec
from wayfinder.routing.pattern import Dynamic, parse_pattern, split_path


def match_pattern(pattern: str, path: str) -> dict[str, str] | None:
    """Match *path* against one *pattern*, returning bound parameters.

    An absent trailing optional parameter is left out of the result.
    Returns None when the pattern does not match. Leading, trailing and
    duplicate slashes in *path* are ignored.
    """
    params: dict[str, str] = {}
    parts = split_path(path)

    i = 0
    for seg in parse_pattern(pattern):
        if isinstance(seg, Dynamic):
            if i < len(parts):
                params[seg.name] = parts[i]
                i += 1
            elif not seg.optional:
                return None
        else:
            if i >= len(parts) or parts[i] != seg.text:
                return None
            i += 1

    if i != len(parts):
        return None
    return params


def match_route(
    routes: Sequence[RouteSpec],
    path: str,
) -> tuple[RouteSpec, dict[str, str]] | None:
    """Return the first spec in *routes* whose pattern matches *path*."""
    for route in routes:
        params = match_pattern(route.pattern, path)
        if params is not None:
            return route, params
    return None
