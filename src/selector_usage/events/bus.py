"""Synchronous event bus carrying audit progress to observers."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe hub between the engine and its observers.

    Listeners are keyed by exact event type; ``on_all`` listeners see every
    event first. Delivery happens on the emitting thread, in subscription
    order. The engine emits whether or not anything is listening.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, listener: Listener) -> Callable[[], None]:
        """Listen for *event_type*; return a callable that removes the listener."""
        listeners = self._by_type.setdefault(event_type, [])
        listeners.append(listener)
        return lambda: _discard(listeners, listener)

    def on_all(self, listener: Listener) -> Callable[[], None]:
        self._catch_all.append(listener)
        return lambda: _discard(self._catch_all, listener)

    def emit(self, event: Any) -> None:
        # Copies, so a listener may unsubscribe while being called.
        for listener in list(self._catch_all):
            listener(event)
        for listener in list(self._by_type.get(type(event), ())):
            listener(event)


def _discard(listeners: list[Listener], listener: Listener) -> None:
    if listener in listeners:
        listeners.remove(listener)
