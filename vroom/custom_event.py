"""Custom events: named events that fire a list of callbacks."""

from __future__ import annotations

from vroom.callbacks import CustomEventCallback, CustomEventCallbackList
from vroom.event import Event


class CustomEvent:
    """Calls every bound callback with the raw event when triggered."""

    def __init__(self) -> None:
        self._callbacks = CustomEventCallbackList()

    def add_callback(self, cb: CustomEventCallback) -> None:
        self._callbacks.add_callback(cb)

    def trigger(self, event: Event) -> None:
        self._callbacks.trigger_all(event)