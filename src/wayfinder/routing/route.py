"""Route: a pattern bound to a metadata factory."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from wayfinder.routing.pattern import Dynamic, Segment, parse_pattern

# Parameters handed to a factory: absent optional parameters map to None
type Params = Mapping[str, str | None]


@dataclass(frozen=True, slots=True, eq=False)
class Route[M]:
    """An immutable route definition.

    Routes compare by identity: two ``Route`` objects with the same path
    and factory are still different registrations.

    ::

        user = Route("/users/:id", lambda params: UserPage(params["id"]))
    """

    path: str
    factory: Callable[[Params], M]
    segments: tuple[Segment, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(parse_pattern(self.path)))

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of the dynamic segments, in pattern order."""
        return tuple(seg.name for seg in self.segments if isinstance(seg, Dynamic))
