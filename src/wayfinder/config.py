"""Router and preload configuration.

Both configs are frozen dataclasses: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from wayfinder.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Client-side router configuration.

    ::

        router = Router(routes, config=RouterConfig(thread_safe=True))
    """

    # Memoize resolved metadata per exact pathname
    cache_metadata: bool = True

    # Guard the metadata cache with a lock for multi-threaded hosts.
    # The trie and registry are read-only after construction.
    thread_safe: bool = False


@dataclass(frozen=True, slots=True)
class PreloadConfig:
    """Server-side preload configuration."""

    # Deadline (seconds) for the whole sub-call fan-out of one path
    timeout: float = 2.0

    # Paths under these prefixes are never preloaded
    reserved_prefixes: tuple[str, ...] = ("/assets/", "/rpc", "/__preload")

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = f"PreloadConfig.timeout must be positive, got {self.timeout!r}"
            raise ConfigurationError(msg)
