"""Tests for event type matching."""

import pytest

from nsevents.lib.namespace import matches, validate_event_type


class TestMatches:
    @pytest.mark.parametrize(
        "registered, query",
        [
            ("myevent", "myevent"),
            ("namespace.myevent", "namespace"),
            ("namespace.myevent.action", "namespace"),
            ("namespace.myevent.action", "namespace.myevent"),
            ("namespace.my-event", "namespace"),
            ("namespace.my[event", "namespace"),
            ("a.b.c.d", "a.b.c"),
        ],
    )
    def test_namespace_matches(self, registered, query):
        assert matches(registered, query)

    @pytest.mark.parametrize(
        "registered, query",
        [
            ("namespace.myevent.action", "myevent.action"),
            ("namespace.myevent", "myevent"),
            ("namespace.myevent", "namespac"),
            ("namespace.myevent", "name"),
            ("namespace.myevent", "namespace.myevent.action"),
            ("namespace", "namespace.myevent"),
            ("namespace-x", "namespace"),
            ("namespacex.myevent", "namespace"),
        ],
    )
    def test_namespace_mismatches(self, registered, query):
        assert not matches(registered, query)

    def test_exact_requires_identical_strings(self):
        assert matches("namespace.myevent", "namespace.myevent", exact=True)
        assert not matches("namespace.myevent", "namespace", exact=True)

    def test_regex_characters_are_not_special(self):
        """Characters meaningful to regexes compare literally."""
        assert not matches("ab.c", "a*")
        assert not matches("abc.d", "a.c")
        assert matches("a*.b", "a*")


class TestValidateEventType:
    def test_returns_valid_type(self):
        assert validate_event_type("a.b") == "a.b"

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="must not be empty"):
            validate_event_type("")

    @pytest.mark.parametrize("event_type", [None, 1, ["a"]])
    def test_rejects_non_string(self, event_type):
        with pytest.raises(TypeError, match="must be a string"):
            validate_event_type(event_type)
