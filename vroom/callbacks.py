"""Ordered lists of callbacks that are fired together."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

CallbackT = TypeVar("CallbackT", bound=Callable[..., Any])

TriggerCallback = Callable[[bool], None]
CustomEventCallback = Callable[[Any], None]


class CallbackList(Generic[CallbackT]):
    """Stores callbacks and calls all of them, in insertion order, on demand."""

    def __init__(self) -> None:
        self._callbacks: list[CallbackT] = []

    def add_callback(self, cb: CallbackT) -> None:
        """Append a callback to the list."""
        self._callbacks.append(cb)

    def trigger_all(self, *args: Any, **kwargs: Any) -> None:
        """Call every stored callback with the given arguments."""
        for cb in self._callbacks:
            cb(*args, **kwargs)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __iter__(self) -> Iterator[CallbackT]:
        return iter(self._callbacks)


TriggerCallbackList = CallbackList[TriggerCallback]
CustomEventCallbackList = CallbackList[CustomEventCallback]