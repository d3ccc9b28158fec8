"""Dot-delimited event type helpers."""

from __future__ import annotations

from nsevents.constants import NAMESPACE_SEPARATOR


def validate_event_type(event_type: str) -> str:
    """Return the event type unchanged, or raise if it can't be registered.

    Raises:
        TypeError: If the event type is not a string.
        ValueError: If the event type is empty.
    """
    if not isinstance(event_type, str):
        raise TypeError(f"Event type must be a string, got {type(event_type).__name__}")
    if not event_type:
        raise ValueError("Event type must not be empty")
    return event_type


def matches(registered: str, query: str, exact: bool = False) -> bool:
    """Check whether a handler registered under `registered` is reached by `query`

    In exact mode the two strings must be identical. Otherwise `query` selects
    `registered` and everything nested below it at a segment boundary:

        matches("namespace.myevent", "namespace")        -> True
        matches("namespace.myevent.action", "namespace.myevent") -> True
        matches("namespace.myevent.action", "myevent.action")    -> False
        matches("namespace.myevent", "namespac")         -> False

    Args:
        registered (str): The event type a handler was registered under.
        query (str): The event type being emitted or removed.
        exact (bool): Require literal equality. Defaults to False.

    Returns:
        bool: True if the registration is selected by the query.
    """
    if registered == query:
        return True
    if exact:
        return False
    return registered.startswith(query + NAMESPACE_SEPARATOR)
