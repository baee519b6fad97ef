"""Zero-payload event with a synchronous listener registry."""

import logging
from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

Handler = Callable[[], None]


class Event:
    """Multi-slot notification.

    Handlers are called synchronously, in subscription order, on the thread
    that calls ``fire``. Exceptions raised by a handler propagate to the caller
    and stop dispatch to the remaining handlers.
    """

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self._handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def fire(self) -> None:
        # Snapshot so handlers may (un)subscribe while being notified
        handlers = list(self._handlers)
        logger.debug("Firing %s to %d handler(s)", self.name, len(handlers))
        for handler in handlers:
            handler()

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Handler]:
        return iter(list(self._handlers))

    def __repr__(self) -> str:
        return f"Event({self.name!r}, handlers={len(self._handlers)})"
