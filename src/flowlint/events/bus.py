"""Synchronous event bus for scan and configuration lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe dispatch on the caller's thread.

    Listeners for a specific event type run after the catch-all listeners,
    each group in registration order. ``subscribe`` and ``on_all`` return a
    function that removes the listener again.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        self._listeners.setdefault(event_type, []).append(callback)
        return lambda: _discard(self._listeners.get(event_type, []), callback)

    def on_all(self, callback: Listener) -> Callable[[], None]:
        self._global_listeners.append(callback)
        return lambda: _discard(self._global_listeners, callback)

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)


def _discard(listeners: list[Listener], callback: Listener) -> None:
    if callback in listeners:
        listeners.remove(callback)
