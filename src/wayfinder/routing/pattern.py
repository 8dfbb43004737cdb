"""Route pattern parsing.

A pattern is a ``/``-delimited path where each non-empty segment is
either a literal or a named parameter::

    "/users"          -> [Literal("users")]
    "/users/:id"      -> [Literal("users"), Dynamic("id")]
    "/posts/:id?"     -> [Literal("posts"), Dynamic("id", optional=True)]

Empty segments are dropped, so leading, trailing and duplicate slashes
all parse the same way.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment that must equal the path segment exactly."""

    text: str


@dataclass(frozen=True, slots=True)
class Dynamic:
    """A named parameter segment, written ``:name`` or ``:name?``."""

    name: str
    optional: bool = False


type Segment = Literal | Dynamic


def split_path(path: str) -> list[str]:
    """Split *path* on ``/`` and drop empty segments."""
    return [part for part in path.split("/") if part]


def parse_segment(part: str) -> Segment:
    """Parse one non-empty pattern segment."""
    if not part.startswith(":"):
        return Literal(part)
    optional = part.endswith("?")
    name = part[1:-1] if optional else part[1:]
    return Dynamic(name, optional)


def parse_pattern(pattern: str) -> list[Segment]:
    """Parse a route pattern string into segments.

    Examples::

        >>> parse_pattern("/")
        []
        >>> parse_pattern("/users/:id")
        [Literal(text='users'), Dynamic(name='id', optional=False)]
    """
    return [parse_segment(part) for part in split_path(pattern)]
