"""Host environment abstraction for the router.

The router never reads a URL bar or history stack itself. It asks a
``Location`` for the current pathname, asks it to navigate, and listens
for navigations the host performs on its own, such as a back button.
"""

import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Location(Protocol):
    """What the router needs from its host."""

    def get_pathname(self) -> str: ...

    def navigate(self, to: str) -> None: ...

    def add_listener(self, listener: Callable[[], None]) -> None: ...

    def remove_listener(self, listener: Callable[[], None]) -> None: ...


class MemoryLocation:
    """In-memory host: a current pathname plus a history stack.

    ``navigate()`` changes the path silently (the router notifies its own
    subscribers after calling it). ``push()`` and ``back()`` simulate
    host-initiated navigation and notify listeners.

    All state is guarded by one lock; listeners are called outside it.
    """

    __slots__ = ("_history", "_listeners", "_lock")

    def __init__(self, initial: str = "/") -> None:
        self._history: list[str] = [initial]
        self._listeners: list[Callable[[], None]] = []
        self._lock = threading.Lock()

    @property
    def history(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._history)

    def get_pathname(self) -> str:
        with self._lock:
            return self._history[-1]

    def navigate(self, to: str) -> None:
        with self._lock:
            self._history.append(to)

    def push(self, to: str) -> None:
        """Navigate as if the host did it, notifying listeners."""
        self.navigate(to)
        self._notify()

    def back(self) -> None:
        """Pop one history entry and notify listeners. No-op at the start."""
        with self._lock:
            if len(self._history) <= 1:
                return
            self._history.pop()
        self._notify()

    def add_listener(self, listener: Callable[[], None]) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener()
