"""Synchronous in-process event channel.

EventEmitter keeps an ordered list of listeners per event name and calls
them in registration order when the event is emitted. Event names are
restricted to the EventName enum so a misspelled name fails at
registration instead of silently never firing.

Listener payloads:

- ``taskStarted(task)``, ``taskComplete(task)``, ``taskSkipped(task)``
- ``success(message)`` when a task group finishes
- ``error(...)`` / ``info(...)`` are free-form and only emitted by callers
"""

from __future__ import annotations

import enum
from collections import defaultdict
from typing import Any, Callable

from flowcontrol.exceptions import UnknownEventError

Listener = Callable[..., Any]


class EventName(str, enum.Enum):
    """Events understood by the emitter."""

    TASK_STARTED = "taskStarted"
    TASK_COMPLETE = "taskComplete"
    TASK_SKIPPED = "taskSkipped"
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


def _coerce(event: EventName | str) -> EventName:
    if isinstance(event, EventName):
        return event
    try:
        return EventName(event)
    except ValueError:
        raise UnknownEventError(str(event)) from None


class EventEmitter:
    """Minimal publish/subscribe notifier.

    Emission is synchronous and not isolated: an exception raised by a
    listener propagates to whoever called ``emit`` and the remaining
    listeners for that emission are not called.
    """

    def __init__(self) -> None:
        self._events: dict[EventName, list[Listener]] = defaultdict(list)

    def on(self, event: EventName | str, listener: Listener) -> None:
        """Register *listener* for *event*. The same callable may be added twice."""
        self._events[_coerce(event)].append(listener)

    def off(self, event: EventName | str, listener: Listener) -> None:
        """Remove the first registration of *listener*; no-op if absent."""
        listeners = self._events.get(_coerce(event))
        if listeners and listener in listeners:
            listeners.remove(listener)

    def emit(self, event: EventName | str, *args: Any) -> None:
        """Call every listener registered for *event* with *args*."""
        # Copy so a listener that registers/unregisters doesn't affect this emission
        for listener in list(self._events.get(_coerce(event), ())):
            listener(*args)

    def listeners(self, event: EventName | str) -> list[Listener]:
        """Listeners registered for *event*, in call order."""
        return list(self._events.get(_coerce(event), ()))
