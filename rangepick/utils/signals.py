"""Synchronous publish/subscribe channel used by the view-models.

Listeners run on the calling thread, in subscription order, before ``emit``
returns, so a UI that re-renders from a listener always sees post-mutation
state. There is no queue: a slow listener blocks the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")

Listener = Callable[..., None]

_log = logging.getLogger(__name__)


@dataclass
class Subscription:
    """Handle returned by ``Signal.subscribe``.

    Attributes:
        token: Key of the listener inside the owning signal.
        signal: Owning signal; ``None`` once cancelled.
    """
    token: int
    signal: Optional["Signal[Any]"]

    @property
    def active(self) -> bool:
        return self.signal is not None and self.signal.has_listener(self.token)

    def cancel(self) -> None:
        """Release the listener. Safe to call more than once."""
        signal = self.signal
        if signal is None:
            return
        self.signal = None
        signal.unsubscribe(self.token)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()


class Signal(Generic[T]):
    """Multicast signal carrying an optional payload of type ``T``."""

    def __init__(self, name: str = "signal") -> None:
        """Create an open signal.

        Args:
            name: Label used in debug logging.
        """
        self.name = name
        self._listeners: Dict[int, Listener] = {}
        self._next_token = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._listeners)

    def has_listener(self, token: int) -> bool:
        return token in self._listeners

    def subscribe(self, listener: Listener) -> Subscription:
        """Register ``listener`` and return its handle.

        Subscribing to a closed signal returns an inactive handle.
        """
        if not callable(listener):
            raise TypeError("Signal listener must be callable.")
        if self._closed:
            _log.debug("Subscribe on closed signal %s ignored.", self.name)
            return Subscription(token=-1, signal=None)
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = listener
        return Subscription(token=token, signal=self)

    def unsubscribe(self, token: int) -> None:
        self._listeners.pop(token, None)

    def emit(self, *payload: T) -> int:
        """Call every listener with ``payload`` and return how many were called.

        A listener that raises propagates to the caller; later listeners are
        not called for that emission.
        """
        if self._closed:
            return 0
        listeners = list(self._listeners.values())
        for listener in listeners:
            listener(*payload)
        return len(listeners)

    def close(self) -> None:
        """Drop all listeners and turn further ``emit``/``subscribe`` into no-ops."""
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        _log.debug("Signal %s closed.", self.name)


__all__ = ["Signal", "Subscription"]
