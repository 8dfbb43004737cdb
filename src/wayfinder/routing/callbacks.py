"""Subscriber registry used for navigation notifications."""

from collections.abc import Callable


class CallbackSet[T]:
    """An insertion-ordered set of callbacks invoked with one argument.

    ``add()`` returns an unsubscribe function. The same callable may be
    added twice; each registration is removed independently.
    """

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        # Used as an ordered set
        self._callbacks: dict[Callable[[T], None], None] = {}

    def add(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register *callback* and return a function that removes it."""

        # Wrap so each registration has its own identity
        def reference(value: T) -> None:
            callback(value)

        self._callbacks[reference] = None

        def unsubscribe() -> None:
            self._callbacks.pop(reference, None)

        return unsubscribe

    def call(self, value: T) -> None:
        """Invoke every callback registered when the call started."""
        for callback in list(self._callbacks):
            callback(value)

    def clear(self) -> None:
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)
