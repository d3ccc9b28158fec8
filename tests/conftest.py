"""Pytest fixtures for nsevents tests."""

import pytest

from nsevents.lib.events import EventEmitter


@pytest.fixture
def emitter():
    """A fresh emitter with an empty registry."""
    return EventEmitter()


@pytest.fixture
def calls():
    """Ordered log of handler invocations, as (name, data) tuples."""
    return []


@pytest.fixture
def recorder(calls):
    """Build named handlers that append to `calls` when invoked."""

    def make(name):
        def handler(data):
            calls.append((name, data))

        handler.__qualname__ = name
        return handler

    return make
