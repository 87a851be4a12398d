# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Synchronous publish/subscribe capability.

Objects that need to announce changes own an :class:`EventEmitter` and
delegate to it, rather than inheriting from it.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional

Listener = Callable[..., Any]


@dataclass
class _Subscription:
    listener: Listener
    once: bool = False


@dataclass
class EventEmitter:
    """Multi-listener, synchronous event emitter.

    Listeners are invoked in subscription order. ``emit`` works on a snapshot
    of the subscriptions taken when it starts, so listeners that subscribe or
    unsubscribe while an event is being delivered only affect later emits.
    """

    _subscriptions: Dict[Hashable, List[_Subscription]] = field(
        default_factory=dict, repr=False
    )

    def on(self, event: Hashable, listener: Listener) -> "EventEmitter":
        """Subscribe a listener to an event.

        Args:
            event: Event name
            listener: Callable invoked with the emitted arguments

        Returns:
            The emitter, for chaining
        """
        self._subscriptions.setdefault(event, []).append(_Subscription(listener))
        return self

    def once(self, event: Hashable, listener: Listener) -> "EventEmitter":
        """Subscribe a listener that is removed before its first invocation."""
        self._subscriptions.setdefault(event, []).append(
            _Subscription(listener, once=True)
        )
        return self

    def off(self, event: Hashable, listener: Listener) -> "EventEmitter":
        """Remove every subscription of ``listener`` to ``event``.

        Removing a listener that is not subscribed does nothing.
        """
        subscriptions = self._subscriptions.get(event)
        if not subscriptions:
            return self

        subscriptions[:] = [s for s in subscriptions if s.listener != listener]

        if not subscriptions:
            del self._subscriptions[event]
        return self

    def emit(self, event: Hashable, *args: Any) -> bool:
        """Synchronously invoke every listener subscribed to ``event``.

        Args:
            event: Event name
            *args: Positional arguments passed to each listener

        Returns:
            True if the event had listeners, False otherwise
        """
        subscriptions = self._subscriptions.get(event)
        if not subscriptions:
            return False

        for subscription in list(subscriptions):
            if subscription.once:
                self._discard(event, subscription)
            subscription.listener(*args)
        return True

    def listeners(self, event: Hashable) -> List[Listener]:
        """Return the listeners subscribed to ``event`` in subscription order."""
        return [s.listener for s in self._subscriptions.get(event, [])]

    def listener_count(self, event: Hashable) -> int:
        return len(self._subscriptions.get(event, []))

    def remove_all_listeners(self, event: Optional[Hashable] = None) -> "EventEmitter":
        """Remove all listeners of ``event``, or of every event when omitted."""
        if event is None:
            self._subscriptions.clear()
        else:
            self._subscriptions.pop(event, None)
        return self

    def _discard(self, event: Hashable, subscription: _Subscription) -> None:
        subscriptions = self._subscriptions.get(event, [])
        # Identity match; a once-listener may share its callable with others.
        for index, candidate in enumerate(subscriptions):
            if candidate is subscription:
                del subscriptions[index]
                break
        if event in self._subscriptions and not subscriptions:
            del self._subscriptions[event]
