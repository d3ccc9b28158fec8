NAMESPACE_SEPARATOR = "."

# Names copied onto a target by attach_emitter()
EMITTER_METHODS = (
    "register",
    "register_once",
    "remove",
    "emit",
    "on",
    "one",
    "once",
    "off",
    "listeners",
    "has_handlers",
    "event_types",
    "clear",
)
