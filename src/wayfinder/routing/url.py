"""URL building: the reverse of route resolution.

Usage::

    build_path(user_route, {"id": "42"})                  # "/users/42"
    build_path(posts_route, {})                           # "/posts"  (":id?" omitted)
    build_path(search_route, {}, {"q": "a b", "page": 2}) # "/search?q=a%20b&page=2"
"""

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from wayfinder.errors import MissingRequiredParameter
from wayfinder.routing.pattern import Dynamic
from wayfinder.routing.route import Route

type QueryValue = str | int | float | bool

# Characters encodeURIComponent leaves alone (beyond alphanumerics and "_.-~")
_UNRESERVED = "!*'()"


def _stringify(value: object) -> str:
    """Render *value* the way JavaScript's ``String()`` would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # String(1.0) == "1"; from 1e21 up both use exponent notation
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


def encode_component(value: str) -> str:
    """Percent-encode *value* for use as a query key or value."""
    return quote(value, safe=_UNRESERVED)


def encode_query(query: Mapping[str, QueryValue]) -> str:
    """Encode a flat mapping as ``key=value&...`` (no leading ``?``)."""
    return "&".join(
        f"{encode_component(key)}={encode_component(_stringify(value))}"
        for key, value in query.items()
    )


def build_path(
    route: Route[Any],
    params: Mapping[str, object],
    query: Mapping[str, QueryValue] | None = None,
) -> str:
    """Reconstruct a concrete path for *route* from *params*.

    A parameter counts as absent when its key is missing or its value is
    None or ``""``. Building stops at the first absent optional parameter:
    nothing after it is emitted, even literal or required segments.

    Raises ``MissingRequiredParameter`` for an absent required parameter.
    """
    parts: list[str] = []
    for seg in route.segments:
        if isinstance(seg, Dynamic):
            value = params.get(seg.name)
            if value is None or value == "":
                if seg.optional:
                    break
                raise MissingRequiredParameter(seg.name, route.path)
            parts.append(_stringify(value))
        else:
            parts.append(seg.text)

    path = "/" + "/".join(parts)
    if query:
        return f"{path}?{encode_query(query)}"
    return path
