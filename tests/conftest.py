"""Pytest fixtures for configinject tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def test_config():
    """Nested plain mapping used across binder tests."""
    return {
        "other_settings": {
            "c": 1.2,
            "d": {
                "many_things": [1, 2, 3],
            },
        },
        "settings": {
            "a": 1,
            "b": "name",
        },
    }


@pytest.fixture
def bind_func():
    """Stand-in for ``Container.bind`` that records every call.

    ``bind_func.return_value.to_constant_value`` records the bound values.
    """
    return MagicMock()


@pytest.fixture
def recorder():
    """A ``register`` callback collecting (key, value) pairs in call order."""
    calls = []

    def register(key, value):
        calls.append((key, value))

    register.calls = calls
    return register
