"""Ways to give other objects the emitter API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from nsevents.constants import EMITTER_METHODS
from nsevents.lib.events import EventEmitter

T = TypeVar("T")


class EventEmitterMixin(EventEmitter):
    """Base class for types that should emit their own events.

    The registry is created on first use, so the mixin can sit anywhere in a
    class's bases and needs no `__init__` call of its own:

        class Player(EventEmitterMixin, BasePlayer):
            def __init__(self, name):
                super().__init__(name)
                self.emit("player.created", self)
    """


def mixin(target: T, source: Mapping[str, Any] | object, names=None) -> T:
    """Copy members from `source` onto `target` and return `target`

    Args:
        target: The object receiving the members. Must have a `__dict__`.
        source: A mapping of name to value, or an object whose public
            instance attributes are copied.
        names: Optional iterable restricting which names are copied.

    Returns:
        The same `target`, for chaining.

    Raises:
        TypeError: If `target` can't take new attributes.
    """
    if not hasattr(target, "__dict__"):
        raise TypeError(f"Cannot mix members into {type(target).__name__}; it has no __dict__")

    members = source if isinstance(source, Mapping) else vars(source)
    if names is None:
        names = [name for name in members if not name.startswith("_")]

    for name in names:
        if name in vars(target):
            logging.debug(f"Overwriting {type(target).__name__}.{name} while mixing in")
        setattr(target, name, members[name])
    return target


def attach_emitter(target: T) -> T:
    """Give an existing object its own event registry and the emitter methods.

    Attributes of `target` outside the emitter API are left alone. Attributes
    named like an emitter method are replaced.
    """
    emitter = EventEmitter()
    methods = {name: getattr(emitter, name) for name in EMITTER_METHODS}
    return mixin(target, methods)
