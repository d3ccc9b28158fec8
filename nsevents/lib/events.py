"""Namespaced event emitter with one-shot handlers."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from nsevents.lib.namespace import matches, validate_event_type

# Default for `context`, so that None can be bound like any other receiver
UNBOUND = object()


class HandlerEntry:
    """A registered callback plus the receiver it is bound to.

    Entries are compared by identity; two registrations of the same callback
    are two separate entries.
    """

    __slots__ = ("event_type", "handler", "context", "once", "fired", "_call")

    def __init__(
        self, event_type: str, handler: Callable, context: Any = UNBOUND, once: bool = False
    ) -> None:
        self.event_type = event_type
        self.handler = handler
        self.context = context
        self.once = once
        self.fired = False
        self._call = handler if context is UNBOUND else functools.partial(handler, context)

    def __call__(self, data: Any) -> None:
        self._call(data)

    def __repr__(self) -> str:
        name = getattr(self.handler, "__qualname__", repr(self.handler))
        return f"HandlerEntry('{self.event_type}', {name}, once={self.once}, fired={self.fired})"


class EventEmitter:
    """Synchronous publish/subscribe over dot-delimited event types.

    Emitting `"a"` reaches handlers registered under `"a"`, `"a.b"`, `"a.b.c"`
    and so on, unless `exact=True` is passed. Handlers run in registration
    order against a snapshot taken when `emit` starts, so handlers that
    register or remove during dispatch only affect later emits.

    Handler exceptions are not caught: the first failure propagates to the
    caller of `emit` and the remaining handlers in that dispatch are skipped.
    """

    @property
    def _registry(self) -> dict[str, list[HandlerEntry]]:
        # Created on first use so subclasses never depend on __init__ running
        return self.__dict__.setdefault("_events", {})

    def register(self, event_type: str, handler: Callable, context: Any = UNBOUND) -> None:
        """Register a handler for an event type.

        Args:
            event_type (str): Dot-delimited event type, e.g. `"player.song.start"`.
            handler (Callable): Called with the emitted data.
            context (Any): Optional receiver, passed to the handler as its first argument.
                Any value can be bound, including None. Without one the handler is
                called as `handler(data)`; the emitter is never passed implicitly.

        Raises:
            TypeError: If the handler is not callable or the event type is not a string.
            ValueError: If the event type is empty.
        """
        self._add(event_type, handler, context, once=False)

    def register_once(self, event_type: str, handler: Callable, context: Any = UNBOUND) -> None:
        """Register a handler that removes itself after its first invocation."""
        self._add(event_type, handler, context, once=True)

    def _add(self, event_type: str, handler: Callable, context: Any, once: bool) -> None:
        validate_event_type(event_type)
        if not callable(handler):
            raise TypeError(f"Handler for '{event_type}' must be callable, got {handler!r}")

        entry = HandlerEntry(event_type, handler, context, once)
        self._registry.setdefault(event_type, []).append(entry)
        logging.debug(f"Registered {entry} for event '{event_type}'")

    def remove(self, event_type: str, handler: Callable | None = None, exact: bool = False) -> None:
        """Remove handlers from every event type matched by `event_type`.

        Without `handler`, all handlers of the matching types are removed.
        With it, only entries whose callback equals `handler` are removed,
        including pending one-shot entries. Bound methods compare equal when
        they wrap the same function and object, so `remove(t, obj.method)`
        works even though each attribute read makes a new method object.
        Matching nothing is a no-op.
        """
        for registered in self._matching_types(event_type, exact):
            if handler is None:
                removed = len(self._registry[registered])
                kept = []
            else:
                kept = [e for e in self._registry[registered] if e.handler != handler]
                removed = len(self._registry[registered]) - len(kept)

            if kept:
                self._registry[registered] = kept
            else:
                del self._registry[registered]

            if removed:
                logging.debug(f"Removed {removed} handler(s) from event '{registered}'")

    def emit(self, event_type: str, data: Any = None, exact: bool = False) -> None:
        """Call every handler matched by `event_type` with `data`."""
        snapshot = [
            entry
            for registered in self._matching_types(event_type, exact)
            for entry in self._registry[registered]
        ]
        for entry in snapshot:
            if entry.once:
                if entry.fired:
                    continue
                entry.fired = True
                self._discard(entry)
            entry(data)

    def _discard(self, entry: HandlerEntry) -> None:
        # One-shot entries only ever leave their own exact key
        entries = self._registry.get(entry.event_type, [])
        for i, candidate in enumerate(entries):
            if candidate is entry:
                del entries[i]
                if not entries:
                    del self._registry[entry.event_type]
                logging.debug(f"One-shot {entry} fired on event '{entry.event_type}'")
                return

    def _matching_types(self, event_type: str, exact: bool) -> list[str]:
        return [registered for registered in self._registry if matches(registered, event_type, exact)]

    def listeners(self, event_type: str, exact: bool = False) -> list[Callable]:
        """Return the handlers `emit(event_type, exact=exact)` would call, in order."""
        return [
            entry.handler
            for registered in self._matching_types(event_type, exact)
            for entry in self._registry[registered]
        ]

    def has_handlers(self, event_type: str | None = None, exact: bool = False) -> bool:
        if event_type is None:
            return bool(self._registry)
        return bool(self._matching_types(event_type, exact))

    def event_types(self) -> list[str]:
        return list(self._registry)

    def clear(self) -> None:
        self._registry.clear()

    # Historical names
    on = register
    one = register_once
    once = register_once
    off = remove
