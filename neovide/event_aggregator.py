"""Typed channels that connect event producers with their consumers."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventTypeAlreadyRegistered(RuntimeError):
    """Raised when a second consumer registers for the same event type."""


class LoggingSender(Generic[T]):
    """The sending end of a channel that logs every message it sends."""

    def __init__(self, channel: queue.SimpleQueue, channel_name: str) -> None:
        self._channel = channel
        self.channel_name = channel_name

    def send(self, message: T) -> None:
        logger.debug("%s %r", self.channel_name, message)
        self._channel.put(message)


def _type_name(event_type: type) -> str:
    return f"{event_type.__module__}.{event_type.__qualname__}"


class EventAggregator:
    """Routes events to one receiving queue per event type.

    An event goes to the channel of the nearest class in its method
    resolution order that already has one; otherwise a channel is made for
    its exact type, and messages wait there until someone registers for it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._senders: dict[type, LoggingSender[Any]] = {}
        self._unclaimed: dict[type, queue.SimpleQueue] = {}

    def _sender_for(self, event_type: type) -> LoggingSender[Any]:
        with self._lock:
            for candidate in event_type.__mro__:
                sender = self._senders.get(candidate)
                if sender is not None:
                    return sender
            channel: queue.SimpleQueue = queue.SimpleQueue()
            sender = LoggingSender(channel, _type_name(event_type))
            self._senders[event_type] = sender
            self._unclaimed[event_type] = channel
            return sender

    def send(self, event: Any) -> None:
        self._sender_for(type(event)).send(event)

    def register_event(self, event_type: type) -> queue.SimpleQueue:
        """Claim the receiving queue for ``event_type``.

        Raises EventTypeAlreadyRegistered if it has been claimed before.
        """
        with self._lock:
            channel = self._unclaimed.pop(event_type, None)
            if channel is not None:
                return channel
            if event_type in self._senders:
                raise EventTypeAlreadyRegistered(
                    f"EventAggregator: type already registered: "
                    f"{_type_name(event_type)}"
                )
            channel = queue.SimpleQueue()
            self._senders[event_type] = LoggingSender(
                channel, _type_name(event_type)
            )
            return channel


EVENT_AGGREGATOR = EventAggregator()