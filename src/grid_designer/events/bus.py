"""Synchronous event bus connecting the store to its observers."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus; listeners run synchronously in registration order.

    Listeners registered with :meth:`on_all` run before type-specific ones.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns a function that unregisters it."""
        self._listeners.setdefault(event_type, []).append(callback)
        return lambda: self._listeners[event_type].remove(callback)

    def on_all(self, callback: Listener) -> Callable[[], None]:
        self._global_listeners.append(callback)
        return lambda: self._global_listeners.remove(callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
