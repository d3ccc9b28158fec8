from nsevents.lib.events import EventEmitter
from nsevents.lib.mixin import EventEmitterMixin, attach_emitter, mixin
from nsevents.lib.namespace import matches
from nsevents.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    EventEmitter.__name__,
    EventEmitterMixin.__name__,
    attach_emitter.__name__,
    mixin.__name__,
    matches.__name__,
]
